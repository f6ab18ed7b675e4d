"""
Data fetchers used by the profile and company pages.

Each one issues a single credentialed GET. Failures are logged and returned
as a failed FetchResult, never raised.
"""

from typing import Optional

import httpx
from loguru import logger

from jobportal.client.api import JobPortalApi
from jobportal.client.state import ClientState, FetchResult


def _body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def fetch_applied_jobs(api: JobPortalApi) -> FetchResult:
    try:
        response = api.get_applied_jobs()
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch applied jobs: {e}")
        return FetchResult.failure(str(e))

    body = _body(response)
    if body.get("success"):
        return FetchResult.success(body.get("applications", []))

    logger.warning(f"Failed to fetch applied jobs: {response.status_code} {body.get('message')}")
    return FetchResult.failure(body.get("message") or f"HTTP {response.status_code}")


def fetch_company_by_id(api: JobPortalApi, company_id: Optional[str]) -> FetchResult:
    """No request is made for an empty id."""
    if not company_id:
        return FetchResult.failure("No company id")

    try:
        response = api.get_company(company_id)
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch company by id: {e}")
        return FetchResult.failure(str(e))

    body = _body(response)
    if body.get("success"):
        return FetchResult.success(body.get("company"))

    logger.warning(f"Failed to fetch company {company_id}: {response.status_code} {body.get('message')}")
    return FetchResult.failure(body.get("message") or f"HTTP {response.status_code}")


class CompanyLoader:
    """Fetches a company whenever the requested id changes."""

    def __init__(self, api: JobPortalApi, state: ClientState):
        self.api = api
        self.state = state
        self._company_id = None

    def load(self, company_id: Optional[str]) -> Optional[FetchResult]:
        """Returns None when the id is unchanged and nothing was fetched."""
        if company_id == self._company_id:
            return None
        self._company_id = company_id
        if not company_id:
            return None

        result = fetch_company_by_id(self.api, company_id)
        self.state.apply_company(result)
        return result
