"""
Python client for the job portal API: the profile page model, the profile
update form and the data fetchers behind them.
"""

from jobportal.client.api import JobPortalApi
from jobportal.client.state import ClientState, FetchResult
from jobportal.client.fetchers import fetch_applied_jobs, fetch_company_by_id, CompanyLoader
from jobportal.client.profile import ProfileView, UpdateProfileForm, ProfileScreen, SelectedFile

__all__ = [
    "JobPortalApi",
    "ClientState",
    "FetchResult",
    "fetch_applied_jobs",
    "fetch_company_by_id",
    "CompanyLoader",
    "ProfileView",
    "UpdateProfileForm",
    "ProfileScreen",
    "SelectedFile"
]
