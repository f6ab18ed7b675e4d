"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from jobportal.schemas.schemas import ErrorResponse

from jobportal.api.routes.user_routes import router as user_router
from jobportal.api.routes.job_routes import router as job_router
from jobportal.api.routes.application_routes import router as application_router
from jobportal.api.routes.company_routes import router as company_router

# Main API router; every error leaves as the same envelope
api_router = APIRouter(responses={
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
})

# Include all sub-routers
api_router.include_router(user_router)
api_router.include_router(job_router)
api_router.include_router(application_router)
api_router.include_router(company_router)
