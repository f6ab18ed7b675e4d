"""
Profile page model and update form.

ProfileView is a pure function of the user record. UpdateProfileForm holds
the editable copy of that record and submits it as multipart form data.
"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import httpx
from loguru import logger

from jobportal.client.api import JobPortalApi
from jobportal.client.fetchers import fetch_applied_jobs
from jobportal.client.state import ClientState

PLACEHOLDER_AVATAR = "https://via.placeholder.com/150"
NOT_AVAILABLE = "NA"
EMPTY_FIELD = "—"


@dataclass(frozen=True)
class ProfileView:
    fullname: str
    email: str
    phone_number: str
    bio: str
    avatar_url: str
    skills: List[str]
    resume_url: Optional[str]
    resume_label: str

    @property
    def skill_badges(self) -> List[str]:
        return self.skills or [NOT_AVAILABLE]

    @property
    def has_resume(self) -> bool:
        return self.resume_url is not None

    @classmethod
    def from_user(cls, user: Optional[dict]) -> "ProfileView":
        user = user or {}
        profile = user.get("profile") or {}
        skills = profile.get("skills")
        resume_url = profile.get("resume") or None

        if resume_url:
            resume_label = profile.get("resumeOriginalName") or resume_url
        else:
            resume_label = NOT_AVAILABLE

        return cls(
            fullname=user.get("fullname") or EMPTY_FIELD,
            email=user.get("email") or EMPTY_FIELD,
            phone_number=user.get("phoneNumber") or EMPTY_FIELD,
            bio=profile.get("bio") or "",
            avatar_url=profile.get("avatar") or PLACEHOLDER_AVATAR,
            skills=list(skills) if isinstance(skills, list) else [],
            resume_url=resume_url,
            resume_label=resume_label
        )


@dataclass
class SelectedFile:
    filename: str
    content: bytes
    content_type: str = "application/pdf"


def _skills_text(skills) -> Optional[str]:
    if isinstance(skills, list):
        return ", ".join(skills)
    return skills


@dataclass
class UpdateProfileForm:
    fullname: str = ""
    email: str = ""
    phoneNumber: str = ""
    bio: str = ""
    skills: str = ""
    file: Optional[SelectedFile] = None
    open: bool = False
    loading: bool = False
    error: Optional[str] = None
    notice: Optional[str] = None
    _seen_user: Optional[dict] = field(default=None, repr=False)

    @classmethod
    def for_user(cls, user: Optional[dict]) -> "UpdateProfileForm":
        form = cls()
        form.sync(user)
        return form

    def sync(self, user: Optional[dict]):
        """
        Re-seed text fields from `user` if the record changed. Fields the
        record lacks keep their current value; the selected file is kept.
        """
        if user == self._seen_user:
            return
        self._seen_user = copy.deepcopy(user)

        user = user or {}
        profile = user.get("profile") or {}
        self.fullname = _pick(user.get("fullname"), self.fullname)
        self.email = _pick(user.get("email"), self.email)
        self.phoneNumber = _pick(user.get("phoneNumber"), self.phoneNumber)
        self.bio = _pick(profile.get("bio"), self.bio)
        self.skills = _pick(_skills_text(profile.get("skills")), self.skills)

    def payload(self) -> Tuple[dict, Optional[dict]]:
        """Multipart text fields and the optional file part."""
        data = {
            "fullname": self.fullname,
            "email": self.email,
            "phoneNumber": self.phoneNumber,
            "bio": self.bio,
            "skills": self.skills
        }
        files = None
        if self.file is not None:
            files = {"file": (self.file.filename, self.file.content, self.file.content_type)}
        return data, files

    def submit(self, api: JobPortalApi, state: ClientState) -> bool:
        """
        Post the form. On success the returned user replaces `state.user` and
        the form closes; on failure it stays open with `error` set.
        """
        self.loading = True
        self.error = None
        try:
            data, files = self.payload()
            response = api.update_profile(data, files)
            body = _json(response)

            if body.get("success"):
                state.set_user(body.get("user"))
                self.notice = body.get("message") or "Profile updated"
                self.open = False
                self.sync(state.user)
                return True

            self.error = body.get("message") or "Failed to update profile"
            return False
        except httpx.HTTPError as e:
            logger.error(f"Profile update failed: {e}")
            self.error = str(e) or "Network error"
            return False
        finally:
            self.loading = False


class ProfileScreen:
    """The profile page: current user's details plus the update dialog."""

    def __init__(self, api: JobPortalApi, state: ClientState):
        self.api = api
        self.state = state
        self._form = UpdateProfileForm.for_user(state.user)
        self._mounted = False

    @property
    def form(self) -> UpdateProfileForm:
        """The update form, re-seeded whenever `state.user` has changed."""
        self._form.sync(self.state.user)
        return self._form

    def mount(self):
        """Load applied jobs once when the page opens."""
        if self._mounted:
            return
        self._mounted = True
        self.state.apply_applied_jobs(fetch_applied_jobs(self.api))

    @property
    def view(self) -> ProfileView:
        return ProfileView.from_user(self.state.user)

    def open_dialog(self):
        self.form.open = True

    def close_dialog(self):
        self._form.open = False


def _pick(value, fallback):
    return fallback if value is None else value


def _json(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
