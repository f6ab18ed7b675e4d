"""
HTTP client for the job portal API.

Keeps one httpx.Client per session so the `token` cookie set by login is
sent back on every following request (the browser's `withCredentials`).
"""

from typing import Optional

import httpx

from jobportal.core.config import get_settings

USER_API_END_POINT = "/user"
JOB_API_END_POINT = "/job"
APPLICATION_API_END_POINT = "/application"
COMPANY_API_END_POINT = "/company"


class JobPortalApi:

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 10.0
    ):
        self.http = httpx.Client(
            base_url=base_url or get_settings().api_base_url,
            transport=transport,
            timeout=timeout
        )

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def login(self, email: str, password: str, role: str) -> httpx.Response:
        return self.http.post(
            f"{USER_API_END_POINT}/login",
            json={"email": email, "password": password, "role": role}
        )

    def logout(self) -> httpx.Response:
        return self.http.post(f"{USER_API_END_POINT}/logout")

    def update_profile(self, data: dict, files: Optional[dict] = None) -> httpx.Response:
        # httpx builds the multipart boundary itself
        return self.http.post(f"{USER_API_END_POINT}/profile/update", data=data, files=files)

    def get_applied_jobs(self) -> httpx.Response:
        return self.http.get(f"{APPLICATION_API_END_POINT}/get")

    def get_company(self, company_id: str) -> httpx.Response:
        return self.http.get(f"{COMPANY_API_END_POINT}/get/{company_id}")
