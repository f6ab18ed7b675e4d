"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt (cost factor from settings)
- JWT token creation/verification
- Session cookie helpers
- FastAPI dependencies for protected routes
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from bson import ObjectId
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request, Response

from jobportal.core.config import get_settings
from jobportal.core.exceptions import UnauthenticatedError, ForbiddenError
from jobportal.db.mongodb import get_collection, COLLECTIONS
from jobportal.schemas.schemas import UserRole

settings = get_settings()

TOKEN_COOKIE = "token"

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds
)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def set_session_cookie(response: Response, token: str):
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.cookie_max_age,
        httponly=True,
        samesite="strict",
        secure=settings.is_production
    )


def clear_session_cookie(response: Response):
    response.delete_cookie(
        TOKEN_COOKIE,
        httponly=True,
        samesite="strict",
        secure=settings.is_production
    )


async def get_current_user_id(request: Request) -> str:
    """
    FastAPI dependency - resolve the caller's user id from the session cookie.

    Usage:
        @router.get("/protected")
        async def route(user_id: str = Depends(get_current_user_id)):
            ...
    """
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise UnauthenticatedError("User not authenticated")

    payload = decode_token(token)
    if not payload or not payload.get("sub"):
        raise UnauthenticatedError("Invalid token")

    return payload["sub"]


async def get_current_admin_id(user_id: str = Depends(get_current_user_id)) -> str:
    """Dependency - Require the admin role. Returns the admin's user id."""
    if not ObjectId.is_valid(user_id):
        raise UnauthenticatedError("User not authenticated")

    user = get_collection(COLLECTIONS["users"]).find_one(
        {"_id": ObjectId(user_id)}, {"role": 1}
    )
    if not user:
        raise UnauthenticatedError("User not authenticated")
    if user.get("role") != UserRole.admin.value:
        raise ForbiddenError("Admins only")
    return user_id
