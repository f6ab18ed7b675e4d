"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Field names follow the wire format the frontend already speaks
(camelCase, `_id` for ids).
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Union
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    admin = "admin"


# ============================================================
# BASE
# ============================================================

class DocumentModel(BaseModel):
    """Base for anything that carries a MongoDB `_id`."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")


# ============================================================
# USER SCHEMAS
# ============================================================

class ProfileResponse(BaseModel):
    bio: Optional[str] = None
    skills: List[str] = []
    resume: Optional[str] = None
    resumeOriginalName: Optional[str] = None
    avatar: Optional[str] = None
    upload: Optional[str] = None


class UserResponse(DocumentModel):
    """Trimmed user projection - never includes the password hash."""
    fullname: str
    email: str
    phoneNumber: Optional[str] = None
    role: str
    profile: ProfileResponse = ProfileResponse()


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class ApplicantResponse(DocumentModel):
    fullname: str
    email: str
    profile: ProfileResponse = ProfileResponse()


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyBrief(DocumentModel):
    """Company fields attached to job listings."""
    name: str
    logo: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None


class CompanyResponse(CompanyBrief):
    description: Optional[str] = None
    userId: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(BaseModel):
    """
    Job posting body. Everything is optional here so that a missing field
    is reported as "Something is missing." instead of a schema error.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    salary: Optional[Union[float, str]] = None
    location: Optional[str] = None
    jobType: Optional[str] = None
    experience: Optional[Union[int, str]] = None
    position: Optional[Union[int, str]] = None
    companyId: Optional[str] = None


class ApplicationBrief(DocumentModel):
    """Application as embedded in a job's detail view."""
    applicant: Optional[Union[ApplicantResponse, str]] = None
    status: Optional[str] = None
    createdAt: Optional[datetime] = None


class JobResponse(DocumentModel):
    title: str
    description: str
    requirements: List[str] = []
    salary: float
    location: str
    jobType: str
    experienceLevel: Union[int, str]
    position: Union[int, str]
    company: Optional[Union[CompanyBrief, str]] = None
    created_by: str
    applications: List[Union[ApplicationBrief, str]] = []
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class AppliedJobResponse(DocumentModel):
    """Application as listed for its applicant, with the job populated."""
    job: Optional[Union[JobResponse, str]] = None
    applicant: str
    status: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


# ============================================================
# ENVELOPES
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True


class UserEnvelope(MessageResponse):
    user: UserResponse


class JobCreatedEnvelope(MessageResponse):
    job: JobResponse


class JobEnvelope(BaseModel):
    job: JobResponse
    success: bool = True


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]
    success: bool = True


class ApplicationListEnvelope(BaseModel):
    applications: List[AppliedJobResponse]
    success: bool = True


class CompanyEnvelope(BaseModel):
    company: CompanyResponse
    success: bool = True


class ErrorResponse(BaseModel):
    message: str
    success: bool = False
