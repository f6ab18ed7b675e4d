"""
Exception hierarchy for the job portal.

Every error carries the HTTP status it maps to and the message that ends up
in the `{message, success: false}` envelope.
"""


class JobPortalError(Exception):
    """Base exception for all application errors"""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(JobPortalError):
    """Missing or invalid input"""
    status_code = 400


class ConflictError(JobPortalError):
    """Resource already exists. Shares 400 with validation failures."""
    status_code = 400


class UnauthenticatedError(JobPortalError):
    """No resolvable caller"""
    status_code = 401


class ForbiddenError(JobPortalError):
    """Caller lacks the role for this operation"""
    status_code = 403


class NotFoundError(JobPortalError):
    """Requested entity does not exist"""
    status_code = 404


class InternalError(JobPortalError):
    """Unexpected persistence or upload failure"""
    status_code = 500
