"""
Upload Service - hosts data URIs on Cloudinary.

The service only knows how to turn a data URI into a public URL; deciding
which profile field receives that URL is done by the caller.
"""

from typing import Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from jobportal.core.config import get_settings

settings = get_settings()


class UploadError(Exception):
    """The storage provider rejected or failed the upload."""
    pass


class FileUploader:
    """Wrapper around the Cloudinary uploader."""

    def __init__(self):
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True
        )

    def upload(self, data_uri: str) -> Optional[str]:
        """
        Upload a data URI. Returns the hosted HTTPS URL, or None when the
        provider answers without one.

        Raises UploadError on provider failures.
        """
        try:
            # resource_type=auto lets PDFs and other documents through
            response = cloudinary.uploader.upload(data_uri, resource_type="auto")
        except CloudinaryError as e:
            raise UploadError(str(e)) from e
        return (response or {}).get("secure_url")


_uploader: FileUploader = None


def get_uploader() -> FileUploader:
    """FastAPI dependency - shared uploader instance."""
    global _uploader
    if _uploader is None:
        _uploader = FileUploader()
    return _uploader
