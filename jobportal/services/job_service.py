"""
Job Service - posting and browsing jobs.

Each public method performs one persistence operation (plus the reads needed
to populate references) and converts driver failures into InternalError with
a generic, operation-specific message.
"""

import math
import re
from typing import List, Optional, Union

from loguru import logger
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from jobportal.core.exceptions import ValidationError, NotFoundError, InternalError
from jobportal.db.mongodb import get_collection, COLLECTIONS
from jobportal.schemas.schemas import JobCreate
from jobportal.services.mongo_service import (
    serialize_doc, serialize_docs, to_object_id, utcnow, populate, populate_many
)

# Company fields attached to every job listing
COMPANY_FIELDS = {"name": 1, "logo": 1, "location": 1, "website": 1}

# Applicant fields attached to applications on the job detail view
APPLICANT_FIELDS = {"fullname": 1, "email": 1, "profile": 1}

NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]

REQUIRED_JOB_FIELDS = [
    "title", "description", "requirements", "salary", "location",
    "jobType", "experience", "position", "companyId"
]


def is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_salary(value: Union[float, int, str]) -> float:
    """Coerce a salary to a number. Raises ValidationError when it is not one."""
    try:
        salary = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Salary must be a number.")
    if not math.isfinite(salary):
        raise ValidationError("Salary must be a number.")
    return salary


def split_requirements(requirements: str) -> List[str]:
    """'a,b,c' -> ['a', 'b', 'c']. Entries are kept exactly as written."""
    return requirements.split(",")


def build_keyword_query(keyword: Optional[str]) -> dict:
    """Case-insensitive substring match on title OR description. Empty keyword matches all."""
    pattern = re.escape(keyword or "")
    return {
        "$or": [
            {"title": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
        ]
    }


class JobService:
    """
    Handles job storage and retrieval.
    Jobs reference a company and the admin user who created them.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["jobs"])
        self.companies: Collection = get_collection(COLLECTIONS["companies"])
        self.applications: Collection = get_collection(COLLECTIONS["applications"])
        self.users: Collection = get_collection(COLLECTIONS["users"])

    def create(self, data: JobCreate, user_id: str) -> dict:
        """
        Create a job owned by `user_id`.

        Raises:
            ValidationError: a required field is missing, the salary is not
                numeric or the company id is malformed
            InternalError: the insert failed
        """
        if any(is_missing(getattr(data, field)) for field in REQUIRED_JOB_FIELDS):
            raise ValidationError("Something is missing.")

        salary = parse_salary(data.salary)
        company_id = to_object_id(data.companyId)
        if company_id is None:
            raise ValidationError("Invalid company id.")

        now = utcnow()
        doc = {
            "title": data.title,
            "description": data.description,
            "requirements": split_requirements(data.requirements),
            "salary": salary,
            "location": data.location,
            "jobType": data.jobType,
            "experienceLevel": data.experience,
            "position": data.position,
            "company": company_id,
            "created_by": to_object_id(user_id),
            "applications": [],
            "createdAt": now,
            "updatedAt": now
        }

        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.exception(f"Error creating job: {e}")
            raise InternalError("Error creating job") from e

        doc["_id"] = result.inserted_id
        logger.info(f"Job {result.inserted_id} created by {user_id}")
        return serialize_doc(doc)

    def search(self, keyword: Optional[str] = None) -> List[dict]:
        """All jobs matching `keyword`, newest first, with company fields attached."""
        try:
            jobs = list(self.collection.find(build_keyword_query(keyword)).sort(NEWEST_FIRST))
            populate(jobs, "company", self.companies, COMPANY_FIELDS)
        except PyMongoError as e:
            logger.exception(f"Error fetching jobs: {e}")
            raise InternalError("Error fetching jobs") from e
        return serialize_docs(jobs)

    def get_by_id(self, job_id: str) -> dict:
        """
        One job with its company and its applications (each with the
        applicant's name, email and profile) attached.
        """
        oid = to_object_id(job_id)
        if oid is None:
            raise NotFoundError("Job not found.")

        try:
            job = self.collection.find_one({"_id": oid})
            if job:
                populate([job], "company", self.companies, COMPANY_FIELDS)
                populate_many(job, "applications", self.applications)
                populate(job["applications"], "applicant", self.users, APPLICANT_FIELDS)
        except PyMongoError as e:
            logger.exception(f"Error fetching job details: {e}")
            raise InternalError("Error fetching job details") from e

        if not job:
            raise NotFoundError("Job not found.")
        return serialize_doc(job)

    def get_by_creator(self, user_id: str) -> List[dict]:
        """Jobs created by `user_id`, newest first, with company fields attached."""
        oid = to_object_id(user_id)
        if oid is None:
            return []

        try:
            jobs = list(self.collection.find({"created_by": oid}).sort(NEWEST_FIRST))
            populate(jobs, "company", self.companies, COMPANY_FIELDS)
        except PyMongoError as e:
            logger.exception(f"Error fetching admin jobs: {e}")
            raise InternalError("Error fetching admin jobs") from e
        return serialize_docs(jobs)
