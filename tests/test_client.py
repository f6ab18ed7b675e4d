from __future__ import annotations

import httpx
import pytest

from jobportal.client import (
    ClientState, CompanyLoader, FetchResult, JobPortalApi, ProfileScreen,
    ProfileView, SelectedFile, UpdateProfileForm, fetch_applied_jobs, fetch_company_by_id,
)
from jobportal.client.profile import PLACEHOLDER_AVATAR

USER = {
    "_id": "65a1b2c3d4e5f60718293a4b",
    "fullname": "Jane Doe",
    "email": "jane@example.com",
    "phoneNumber": "5550100",
    "role": "student",
    "profile": {"bio": "Hello", "skills": ["React", "Node"]},
}


def make_api(handler) -> JobPortalApi:
    return JobPortalApi(base_url="http://api.test/api/v1", transport=httpx.MockTransport(handler))


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code=200, json=None, exc=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json = json
        self.exc = exc

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.json)


# ------------------------------------------------------------
# fetchers
# ------------------------------------------------------------

def test_fetch_applied_jobs_success():
    handler = Recorder(json={"applications": [{"_id": "a1"}], "success": True})

    result = fetch_applied_jobs(make_api(handler))

    assert result == FetchResult(ok=True, data=[{"_id": "a1"}])
    assert handler.requests[0].method == "GET"
    assert handler.requests[0].url.path == "/api/v1/application/get"


def test_fetch_applied_jobs_server_failure():
    handler = Recorder(status_code=404, json={"message": "No Applications", "success": False})

    result = fetch_applied_jobs(make_api(handler))

    assert result.ok is False
    assert result.error == "No Applications"


def test_fetch_applied_jobs_transport_error_is_not_raised():
    handler = Recorder(exc=httpx.ConnectError("refused"))

    result = fetch_applied_jobs(make_api(handler))

    assert result.ok is False
    assert "refused" in result.error


def test_fetch_company_skips_empty_id():
    handler = Recorder(json={"company": {}, "success": True})

    result = fetch_company_by_id(make_api(handler), "")

    assert result.ok is False
    assert handler.requests == []


def test_company_loader_refetches_only_when_id_changes():
    handler = Recorder(json={"company": {"_id": "c1", "name": "Acme"}, "success": True})
    state = ClientState()
    loader = CompanyLoader(make_api(handler), state)

    loader.load("c1")
    loader.load("c1")
    loader.load("c2")

    assert [request.url.path for request in handler.requests] == [
        "/api/v1/company/get/c1",
        "/api/v1/company/get/c2",
    ]
    assert state.single_company == {"_id": "c1", "name": "Acme"}


def test_state_ignores_failed_results():
    state = ClientState(applied_jobs=[{"_id": "kept"}])

    state.apply_applied_jobs(FetchResult.failure("boom"))

    assert state.applied_jobs == [{"_id": "kept"}]


# ------------------------------------------------------------
# profile view
# ------------------------------------------------------------

def test_profile_view_defaults_for_empty_profile():
    view = ProfileView.from_user({"fullname": "Jane", "email": "jane@example.com", "profile": {}})

    assert view.avatar_url == PLACEHOLDER_AVATAR
    assert view.skills == []
    assert view.skill_badges == ["NA"]
    assert view.has_resume is False
    assert view.resume_label == "NA"


def test_profile_view_uses_resume_name_then_url():
    named = ProfileView.from_user({"profile": {"resume": "https://cdn/cv.pdf", "resumeOriginalName": "cv.pdf"}})
    unnamed = ProfileView.from_user({"profile": {"resume": "https://cdn/cv.pdf"}})

    assert named.resume_label == "cv.pdf"
    assert unnamed.resume_label == "https://cdn/cv.pdf"
    assert named.resume_url == "https://cdn/cv.pdf"


# ------------------------------------------------------------
# update form
# ------------------------------------------------------------

def test_form_is_seeded_from_user():
    form = UpdateProfileForm.for_user(USER)

    assert form.fullname == "Jane Doe"
    assert form.skills == "React, Node"
    assert form.bio == "Hello"


def test_form_sync_keeps_values_missing_from_new_record():
    form = UpdateProfileForm.for_user(USER)
    form.file = SelectedFile("cv.pdf", b"%PDF")

    form.sync({"fullname": "Jane Smith", "profile": {}})

    assert form.fullname == "Jane Smith"
    assert form.email == "jane@example.com"
    assert form.skills == "React, Node"
    assert form.file is not None


def test_form_payload_includes_file_part():
    form = UpdateProfileForm.for_user(USER)
    form.file = SelectedFile("cv.pdf", b"%PDF")

    data, files = form.payload()

    assert data["skills"] == "React, Node"
    assert files == {"file": ("cv.pdf", b"%PDF", "application/pdf")}


def test_form_submit_success_replaces_user_and_closes():
    updated = dict(USER, fullname="Jane Smith")
    handler = Recorder(json={"message": "Profile updated successfully.", "user": updated, "success": True})
    state = ClientState(user=USER)
    form = UpdateProfileForm.for_user(USER)
    form.open = True
    form.fullname = "Jane Smith"

    assert form.submit(make_api(handler), state) is True

    assert state.user == updated
    assert form.open is False
    assert form.loading is False
    request = handler.requests[0]
    assert request.url.path == "/api/v1/user/profile/update"
    assert b"fullname=Jane+Smith" in request.read()


def test_form_submit_failure_keeps_dialog_open_with_server_message():
    handler = Recorder(status_code=400, json={"message": "Invalid file provided", "success": False})
    state = ClientState(user=USER)
    form = UpdateProfileForm.for_user(USER)
    form.open = True

    assert form.submit(make_api(handler), state) is False

    assert form.open is True
    assert form.error == "Invalid file provided"
    assert state.user == USER


def test_form_submit_network_error():
    handler = Recorder(exc=httpx.ConnectError("network down"))
    form = UpdateProfileForm.for_user(USER)

    assert form.submit(make_api(handler), ClientState(user=USER)) is False

    assert form.error == "network down"
    assert form.loading is False


# ------------------------------------------------------------
# profile screen
# ------------------------------------------------------------

def test_profile_screen_fetches_applied_jobs_once():
    handler = Recorder(json={"applications": [{"_id": "a1"}], "success": True})
    state = ClientState(user=USER)
    screen = ProfileScreen(make_api(handler), state)

    screen.mount()
    screen.mount()

    assert len(handler.requests) == 1
    assert state.applied_jobs == [{"_id": "a1"}]
    assert screen.view.skill_badges == ["React", "Node"]


@pytest.mark.parametrize("user", [None, {}])
def test_profile_screen_without_user(user):
    screen = ProfileScreen(make_api(Recorder(json={})), ClientState(user=user))

    assert screen.view.fullname == "—"
    assert screen.form.fullname == ""


def test_form_resyncs_after_in_place_user_change():
    user = {"fullname": "Jane", "email": "jane@example.com", "profile": {}}
    form = UpdateProfileForm.for_user(user)

    user["fullname"] = "Changed"
    form.sync(user)

    assert form.fullname == "Changed"


def test_profile_screen_form_follows_user_while_dialog_open():
    state = ClientState(user=USER)
    screen = ProfileScreen(make_api(Recorder(json={})), state)
    screen.open_dialog()

    state.set_user(dict(USER, fullname="Jane Smith"))

    assert screen.view.fullname == "Jane Smith"
    assert screen.form.fullname == "Jane Smith"
    assert screen.form.open is True


def test_profile_screen_form_keeps_edits_while_user_unchanged():
    screen = ProfileScreen(make_api(Recorder(json={})), ClientState(user=USER))
    screen.open_dialog()

    screen.form.bio = "Draft bio"

    assert screen.form.bio == "Draft bio"


# ------------------------------------------------------------
# session
# ------------------------------------------------------------

def test_login_posts_credentials_and_keeps_cookie():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/user/login"):
            return httpx.Response(
                200,
                json={"message": "Welcome back Jane Doe", "user": USER, "success": True},
                headers={"set-cookie": "token=abc; Path=/; HttpOnly"},
            )
        return httpx.Response(200, json={"cookie": request.headers.get("cookie")})

    api = make_api(handler)

    response = api.login("jane@example.com", "secret123", "student")

    assert response.json()["user"] == USER
    assert api.get_applied_jobs().json() == {"cookie": "token=abc"}


def test_logout_posts_to_logout():
    handler = Recorder(json={"message": "Logged out successfully.", "success": True})

    response = make_api(handler).logout()

    assert response.json()["success"] is True
    assert handler.requests[0].method == "POST"
    assert handler.requests[0].url.path == "/api/v1/user/logout"
