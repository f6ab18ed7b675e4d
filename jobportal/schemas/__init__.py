"""
Schemas module - Request/Response schemas for API endpoints.

Schemas are the API contract (what client sends/receives); the documents in
MongoDB are plain dicts shaped the same way.
"""

from jobportal.schemas.schemas import UserRole

__all__ = ["UserRole"]
