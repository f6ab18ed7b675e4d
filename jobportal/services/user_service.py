"""
User Service - registration, login and profile updates.

Passwords are stored as bcrypt hashes and never leave this module: every
user returned to a route is the trimmed projection built by `to_public_user`.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from loguru import logger
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from jobportal.core.auth import hash_password, verify_password, create_access_token
from jobportal.core.exceptions import (
    ValidationError, ConflictError, NotFoundError, InternalError
)
from jobportal.db.mongodb import get_collection, COLLECTIONS
from jobportal.schemas.schemas import UserRole, LoginRequest
from jobportal.services.mongo_service import serialize_doc, to_object_id, utcnow
from jobportal.services.upload_service import FileUploader, UploadError
from jobportal.utils.file_upload import IncomingFile, UploadKind, to_data_uri, classify_upload

PUBLIC_USER_FIELDS = ("_id", "fullname", "email", "phoneNumber", "role", "profile")

DUPLICATE_EMAIL = "User already exist with this email."
BAD_CREDENTIALS = "Incorrect email or password."


@dataclass
class Registration:
    fullname: Optional[str] = None
    email: Optional[str] = None
    phoneNumber: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


@dataclass
class ProfileUpdate:
    fullname: Optional[str] = None
    email: Optional[str] = None
    phoneNumber: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[str] = None


def to_public_user(doc: dict) -> dict:
    """Trimmed user projection: safe to send to the client."""
    user = serialize_doc(doc)
    return {field: user.get(field) for field in PUBLIC_USER_FIELDS if field in user}


def parse_skills(skills: Optional[str]) -> Optional[List[str]]:
    """
    ' React, , Node ' -> ['React', 'Node'].
    None when there is nothing to parse, so the stored list is left alone.
    """
    if not isinstance(skills, str) or not skills.strip():
        return None
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


class UserService:
    """
    Handles user accounts.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["users"])

    # --------------------------------------------------------
    # Registration
    # --------------------------------------------------------

    def register(
        self,
        data: Registration,
        file: Optional[IncomingFile] = None,
        uploader: Optional[FileUploader] = None
    ) -> dict:
        """
        Create an account. An attached file becomes the profile avatar.

        Raises:
            ValidationError: missing field, unknown role or unreadable file
            ConflictError: email already registered
            InternalError: persistence or upload failure
        """
        if not all([data.fullname, data.email, data.phoneNumber, data.password, data.role]):
            raise ValidationError("Something is missing")
        if data.role not in {role.value for role in UserRole}:
            raise ValidationError("Invalid role")

        data_uri = None
        if file is not None:
            data_uri = to_data_uri(file)
            if not data_uri:
                raise ValidationError("Invalid file uploaded")

        try:
            if self.collection.find_one({"email": data.email}, {"_id": 1}):
                raise ConflictError(DUPLICATE_EMAIL)

            avatar_url = uploader.upload(data_uri) if data_uri else None

            now = utcnow()
            doc = {
                "fullname": data.fullname,
                "email": data.email,
                "phoneNumber": data.phoneNumber,
                "password": hash_password(data.password),
                "role": data.role,
                "profile": {
                    "bio": None,
                    "skills": [],
                    "resume": None,
                    "resumeOriginalName": None,
                    "avatar": avatar_url
                },
                "createdAt": now,
                "updatedAt": now
            }
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            # Lost a race against a concurrent registration
            raise ConflictError(DUPLICATE_EMAIL) from e
        except (PyMongoError, UploadError) as e:
            logger.exception(f"register error: {e}")
            raise InternalError("Server error") from e

        logger.info(f"Registered user {result.inserted_id} as {data.role}")
        doc["_id"] = result.inserted_id
        return to_public_user(doc)

    # --------------------------------------------------------
    # Login
    # --------------------------------------------------------

    def login(self, credentials: LoginRequest) -> Tuple[dict, str]:
        """
        Check credentials and issue a session token.

        Unknown email, wrong password and wrong role all fail the same way.

        Returns:
            (trimmed user, signed token)
        """
        if not all([credentials.email, credentials.password, credentials.role]):
            raise ValidationError("Something is missing")

        try:
            user = self.collection.find_one({"email": credentials.email})
        except PyMongoError as e:
            logger.exception(f"login error: {e}")
            raise InternalError("Server error") from e

        if not user or not verify_password(credentials.password, user.get("password", "")):
            raise ValidationError(BAD_CREDENTIALS)
        if credentials.role != user.get("role"):
            raise ValidationError(BAD_CREDENTIALS)

        token = create_access_token(data={"sub": str(user["_id"])})
        return to_public_user(user), token

    # --------------------------------------------------------
    # Profile
    # --------------------------------------------------------

    def update_profile(
        self,
        user_id: str,
        update: ProfileUpdate,
        file: Optional[IncomingFile] = None,
        uploader: Optional[FileUploader] = None
    ) -> dict:
        """
        Partial profile update. Only present, non-empty fields overwrite the
        stored ones. An attached file is routed by MIME type:
        image -> avatar, PDF -> resume (+ original name), else -> upload.
        """
        oid = to_object_id(user_id)
        if oid is None:
            raise NotFoundError("User not found.")

        try:
            user = self.collection.find_one({"_id": oid})
            if not user:
                raise NotFoundError("User not found.")

            changes = {}
            if update.fullname:
                changes["fullname"] = update.fullname
            if update.email and update.email != user.get("email"):
                if self.collection.find_one({"email": update.email, "_id": {"$ne": oid}}, {"_id": 1}):
                    raise ConflictError(DUPLICATE_EMAIL)
                changes["email"] = update.email
            if update.phoneNumber:
                changes["phoneNumber"] = update.phoneNumber
            if update.bio:
                changes["profile.bio"] = update.bio

            skills = parse_skills(update.skills)
            if skills is not None:
                changes["profile.skills"] = skills

            if file is not None:
                changes.update(self._upload_profile_file(file, uploader))

            if not changes:
                return to_public_user(user)

            changes["updatedAt"] = utcnow()
            updated = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError as e:
            raise ConflictError(DUPLICATE_EMAIL) from e
        except (PyMongoError, UploadError) as e:
            logger.exception(f"updateProfile error: {e}")
            raise InternalError("Server error") from e

        if not updated:
            # Deleted between the read and the write
            raise NotFoundError("User not found.")
        return to_public_user(updated)

    def _upload_profile_file(self, file: IncomingFile, uploader: FileUploader) -> dict:
        data_uri = to_data_uri(file)
        if not data_uri:
            raise ValidationError("Invalid file provided")

        url = uploader.upload(data_uri)
        kind = classify_upload(file.content_type)
        logger.debug(f"Profile upload {file.filename!r} classified as {kind.value}")

        changes = {}
        if kind is UploadKind.AVATAR:
            if url:
                changes["profile.avatar"] = url
        elif kind is UploadKind.RESUME:
            if url:
                changes["profile.resume"] = url
            changes["profile.resumeOriginalName"] = file.filename
        else:
            if url:
                changes["profile.upload"] = url
        return changes
