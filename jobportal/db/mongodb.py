"""
MongoDB Connection Utility

Collections:
- users: accounts with an embedded profile sub-document
- jobs: postings, referencing a company and the admin who created them
- companies: employer records referenced by jobs
- applications: links an applicant (user) to a job
"""
from pymongo import MongoClient, ASCENDING
from pymongo.database import Database
from pymongo.collection import Collection
from loguru import logger

from jobportal.core.config import get_settings

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, tz_aware=True)
    return _client


def get_mongo_db() -> Database:
    """Get the job portal database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection. Use the COLLECTIONS constants for names."""
    db = get_mongo_db()
    return db[name]


def close_mongo_client():
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        get_mongo_db().command("ping")
        return True
    except Exception as e:
        logger.warning(f"MongoDB connection failed: {e}")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "jobs": "jobs",
    "companies": "companies",
    "applications": "applications"
}


def init_mongo_indexes():
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = get_mongo_db()

    # One account per email
    db[COLLECTIONS["users"]].create_index([("email", ASCENDING)], unique=True)

    # Admin job listings and company lookups
    db[COLLECTIONS["jobs"]].create_index("created_by")
    db[COLLECTIONS["jobs"]].create_index("company")

    # Applied-jobs lookup per user
    db[COLLECTIONS["applications"]].create_index("applicant")

    logger.info("MongoDB indexes created successfully")
