"""
Application Service - read side of job applications.

Applications are created elsewhere; here they are only listed for their
applicant, with the job and the job's company populated.
"""

from typing import List

from loguru import logger
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from jobportal.core.exceptions import NotFoundError, InternalError
from jobportal.db.mongodb import get_collection, COLLECTIONS
from jobportal.services.job_service import COMPANY_FIELDS, NEWEST_FIRST
from jobportal.services.mongo_service import serialize_docs, to_object_id, populate


class ApplicationService:

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["applications"])
        self.jobs: Collection = get_collection(COLLECTIONS["jobs"])
        self.companies: Collection = get_collection(COLLECTIONS["companies"])

    def get_applied_jobs(self, user_id: str) -> List[dict]:
        """Applications made by `user_id`, newest first."""
        oid = to_object_id(user_id)
        if oid is None:
            raise NotFoundError("No Applications")

        try:
            applications = list(self.collection.find({"applicant": oid}).sort(NEWEST_FIRST))
            populate(applications, "job", self.jobs)
            jobs = [app["job"] for app in applications if app.get("job")]
            populate(jobs, "company", self.companies, COMPANY_FIELDS)
        except PyMongoError as e:
            logger.exception(f"Error fetching applied jobs: {e}")
            raise InternalError("Error fetching applied jobs") from e

        if not applications:
            raise NotFoundError("No Applications")
        return serialize_docs(applications)
