"""
Client-side state.

Fetchers return a FetchResult; the caller decides what to do with it by
handing it to a ClientState it owns. Nothing is mutated behind its back.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class FetchResult:
    ok: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any) -> "FetchResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(ok=False, error=error)


@dataclass
class ClientState:
    user: Optional[dict] = None
    applied_jobs: List[dict] = field(default_factory=list)
    single_company: Optional[dict] = None

    def set_user(self, user: Optional[dict]):
        self.user = user

    def apply_applied_jobs(self, result: FetchResult):
        if result.ok:
            self.applied_jobs = result.data or []

    def apply_company(self, result: FetchResult):
        if result.ok:
            self.single_company = result.data
