from __future__ import annotations

import base64
import inspect
import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from jobportal.api.routes import user_routes
from jobportal.utils.file_upload import IncomingFile, UploadKind, classify_upload, read_upload, to_data_uri


def test_data_uri_uses_extension_for_mime_type():
    uri = to_data_uri(IncomingFile(filename="cv.PDF", content=b"%PDF", content_type="application/octet-stream"))

    assert uri == "data:application/pdf;base64," + base64.b64encode(b"%PDF").decode()


def test_data_uri_falls_back_to_declared_type_for_unknown_extension():
    uri = to_data_uri(IncomingFile(filename="blob.zzzunknown", content=b"x", content_type="text/x-custom"))

    assert uri.startswith("data:text/x-custom;base64,")


@pytest.mark.parametrize("file", [
    None,
    IncomingFile(filename=None, content=b"x"),
    IncomingFile(filename="", content=b"x"),
    IncomingFile(filename="Makefile", content=b"x"),
    IncomingFile(filename="photo.png", content=None),
])
def test_data_uri_is_none_for_unusable_files(file):
    assert to_data_uri(file) is None


@pytest.mark.parametrize("content_type, kind", [
    ("image/png", UploadKind.AVATAR),
    ("image/jpeg", UploadKind.AVATAR),
    ("application/pdf", UploadKind.RESUME),
    ("text/plain", UploadKind.OTHER),
    ("application/msword", UploadKind.OTHER),
    (None, UploadKind.OTHER),
])
def test_classify_upload(content_type, kind):
    assert classify_upload(content_type) is kind


def test_read_upload_reads_whole_file_without_an_event_loop():
    upload = UploadFile(
        file=io.BytesIO(b"%PDF-1.4"),
        filename="cv.pdf",
        headers=Headers({"content-type": "application/pdf"}),
    )
    upload.file.read(2)

    incoming = read_upload(upload)

    assert incoming == IncomingFile(filename="cv.pdf", content=b"%PDF-1.4", content_type="application/pdf")
    assert read_upload(None) is None


@pytest.mark.parametrize("endpoint", [user_routes.register, user_routes.update_profile])
def test_upload_routes_run_in_threadpool(endpoint):
    assert not inspect.iscoroutinefunction(endpoint)
