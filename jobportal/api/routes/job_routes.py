"""
Job Routes

POST /job/post - Create job posting (admin only)
GET /job/get - List jobs, optional ?keyword= search on title/description
GET /job/get/{job_id} - Job details with company and applications
GET /job/getadminjobs - Jobs created by the calling admin
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from jobportal.core.auth import get_current_admin_id
from jobportal.services.job_service import JobService
from jobportal.schemas.schemas import (
    JobCreate, JobCreatedEnvelope, JobEnvelope, JobListEnvelope
)

router = APIRouter(prefix="/job", tags=["Jobs"])


@router.post("/post", response_model=JobCreatedEnvelope, status_code=201)
async def post_job(job: JobCreate, admin_id: str = Depends(get_current_admin_id)):
    """Create a new job posting. `requirements` is a comma-separated string."""
    created = JobService().create(job, admin_id)
    return JobCreatedEnvelope(message="New job created successfully.", job=created)


@router.get("/get", response_model=JobListEnvelope)
async def get_all_jobs(keyword: Optional[str] = Query("", description="Search in title and description")):
    """List jobs matching the keyword, newest first."""
    return JobListEnvelope(jobs=JobService().search(keyword))


@router.get("/getadminjobs", response_model=JobListEnvelope)
async def get_admin_jobs(admin_id: str = Depends(get_current_admin_id)):
    """Jobs created by the current admin, newest first."""
    return JobListEnvelope(jobs=JobService().get_by_creator(admin_id))


@router.get("/get/{job_id}", response_model=JobEnvelope)
async def get_job_by_id(job_id: str):
    """Get details of a specific job."""
    return JobEnvelope(job=JobService().get_by_id(job_id))
