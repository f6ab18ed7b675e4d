"""
Company Routes

GET /company/get/{company_id} - Company details
"""

from fastapi import APIRouter, Depends

from jobportal.core.auth import get_current_user_id
from jobportal.services.company_service import CompanyService
from jobportal.schemas.schemas import CompanyEnvelope

router = APIRouter(prefix="/company", tags=["Companies"])


@router.get("/get/{company_id}", response_model=CompanyEnvelope)
async def get_company_by_id(company_id: str, user_id: str = Depends(get_current_user_id)):
    """Get a company by id. Requires a session."""
    return CompanyEnvelope(company=CompanyService().get_by_id(company_id))
