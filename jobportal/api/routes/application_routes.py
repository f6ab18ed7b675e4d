"""
Application Routes

GET /application/get - Applications made by the current user
"""

from fastapi import APIRouter, Depends

from jobportal.core.auth import get_current_user_id
from jobportal.services.application_service import ApplicationService
from jobportal.schemas.schemas import ApplicationListEnvelope

router = APIRouter(prefix="/application", tags=["Applications"])


@router.get("/get", response_model=ApplicationListEnvelope)
async def get_applied_jobs(user_id: str = Depends(get_current_user_id)):
    """Applied jobs for the current user, newest first, with job and company attached."""
    return ApplicationListEnvelope(applications=ApplicationService().get_applied_jobs(user_id))
