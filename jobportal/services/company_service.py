"""
Company Service - company lookups. Companies are read-only here.
"""

from loguru import logger
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from jobportal.core.exceptions import NotFoundError, InternalError
from jobportal.db.mongodb import get_collection, COLLECTIONS
from jobportal.services.mongo_service import serialize_doc, to_object_id


class CompanyService:

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["companies"])

    def get_by_id(self, company_id: str) -> dict:
        oid = to_object_id(company_id)
        if oid is None:
            raise NotFoundError("Company not found.")

        try:
            company = self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.exception(f"Error fetching company: {e}")
            raise InternalError("Error fetching company") from e

        if not company:
            raise NotFoundError("Company not found.")
        return serialize_doc(company)
