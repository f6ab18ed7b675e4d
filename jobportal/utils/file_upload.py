"""
File Upload Utility - turn uploaded files into data URIs and decide where
they belong on a user's profile.

Routing by MIME type:
- image/*          -> profile.avatar
- application/pdf  -> profile.resume (+ resumeOriginalName)
- anything else    -> profile.upload
"""

import base64
import mimetypes
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import UploadFile


class UploadKind(str, Enum):
    AVATAR = "avatar"
    RESUME = "resume"
    OTHER = "other"


@dataclass
class IncomingFile:
    """An uploaded file fully read into memory."""
    filename: Optional[str]
    content: bytes
    content_type: Optional[str] = None


def read_upload(file: Optional[UploadFile]) -> Optional[IncomingFile]:
    """Read a FastAPI UploadFile into memory. None when nothing was attached."""
    if file is None:
        return None
    file.file.seek(0)
    content = file.file.read()
    return IncomingFile(filename=file.filename, content=content, content_type=file.content_type)


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension, including the dot."""
    return os.path.splitext(filename)[1].lower()


def to_data_uri(file: Optional[IncomingFile]) -> Optional[str]:
    """
    Encode a file as `data:<mime>;base64,<payload>`.

    The MIME type is derived from the file extension. Returns None when the
    file has no name, no content buffer or no extension.
    """
    if file is None or not file.filename or file.content is None:
        return None

    ext = get_file_extension(file.filename)
    if not ext:
        return None

    mime, _ = mimetypes.guess_type(f"file{ext}")
    mime = mime or file.content_type or "application/octet-stream"
    payload = base64.b64encode(file.content).decode("ascii")
    return f"data:{mime};base64,{payload}"


def classify_upload(content_type: Optional[str]) -> UploadKind:
    """Pick the profile field an upload lands in from its MIME type."""
    if content_type and content_type.startswith("image/"):
        return UploadKind.AVATAR
    if content_type == "application/pdf":
        return UploadKind.RESUME
    return UploadKind.OTHER
