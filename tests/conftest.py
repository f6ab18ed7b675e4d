from __future__ import annotations

from datetime import datetime, timedelta, timezone

import mongomock
import pytest
from fastapi.testclient import TestClient

from jobportal.core.auth import create_access_token, hash_password, TOKEN_COOKIE
from jobportal.db import mongodb
from jobportal.main import app
from jobportal.services.upload_service import get_uploader, UploadError

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeUploader:
    """Records data URIs instead of sending them to Cloudinary."""

    def __init__(self):
        self.uploads: list[str] = []
        self.url: str | None = "https://res.cloudinary.com/demo/upload/v1/file"
        self.fail = False

    def upload(self, data_uri: str) -> str | None:
        if self.fail:
            raise UploadError("provider unavailable")
        self.uploads.append(data_uri)
        return self.url


@pytest.fixture
def db(monkeypatch):
    database = mongomock.MongoClient()["jobportal_test"]
    monkeypatch.setattr(mongodb, "_db", database)
    mongodb.init_mongo_indexes()
    return database


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def client(db, uploader):
    app.dependency_overrides[get_uploader] = lambda: uploader
    with TestClient(app, base_url="http://testserver/api/v1") as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, *, email="jane@example.com", password="secret123", role="student",
              fullname="Jane Doe", profile=None):
    doc = {
        "fullname": fullname,
        "email": email,
        "phoneNumber": "5550100",
        "password": hash_password(password),
        "role": role,
        "profile": profile if profile is not None else {"bio": None, "skills": [], "avatar": None},
        "createdAt": BASE_TIME,
        "updatedAt": BASE_TIME,
    }
    doc["_id"] = db.users.insert_one(doc).inserted_id
    return doc


def make_company(db, name="Acme"):
    doc = {
        "name": name,
        "description": "Widgets",
        "website": "https://acme.example",
        "location": "Remote",
        "logo": "https://acme.example/logo.png",
    }
    doc["_id"] = db.companies.insert_one(doc).inserted_id
    return doc


def make_job(db, *, company, creator, title="Backend Engineer", description="Build APIs",
             minutes=0, applications=None):
    created = BASE_TIME + timedelta(minutes=minutes)
    doc = {
        "title": title,
        "description": description,
        "requirements": ["Python"],
        "salary": 100000.0,
        "location": "Remote",
        "jobType": "Full Time",
        "experienceLevel": 2,
        "position": 1,
        "company": company["_id"],
        "created_by": creator["_id"],
        "applications": applications or [],
        "createdAt": created,
        "updatedAt": created,
    }
    doc["_id"] = db.jobs.insert_one(doc).inserted_id
    return doc


def login_as(client, user):
    client.cookies.set(TOKEN_COOKIE, create_access_token({"sub": str(user["_id"])}))
