"""
User Routes

POST /user/register - Register (multipart, optional avatar file)
POST /user/login - Login, sets the `token` session cookie
GET|POST /user/logout - Clear the session cookie
POST /user/profile/update - Partial profile update (multipart, optional file)
"""

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from typing import Optional

from jobportal.core.auth import get_current_user_id, set_session_cookie, clear_session_cookie
from jobportal.services.upload_service import FileUploader, get_uploader
from jobportal.services.user_service import UserService, Registration, ProfileUpdate
from jobportal.utils.file_upload import read_upload
from jobportal.schemas.schemas import LoginRequest, MessageResponse, UserEnvelope

router = APIRouter(prefix="/user", tags=["Users"])


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phoneNumber: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    uploader: FileUploader = Depends(get_uploader)
):
    """
    Register a new account. An attached image becomes the profile avatar.

    After registration, login to get the session cookie.
    """
    data = Registration(
        fullname=fullname, email=email, phoneNumber=phoneNumber,
        password=password, role=role
    )
    UserService().register(data, read_upload(file), uploader)
    return MessageResponse(message="Account created successfully.")


@router.post("/login", response_model=UserEnvelope)
def login(request: LoginRequest, response: Response):
    """
    Login and receive the session cookie.

    The cookie is HttpOnly and SameSite=Strict; browsers send it back
    automatically on credentialed requests.
    """
    user, token = UserService().login(request)
    set_session_cookie(response, token)
    return UserEnvelope(message=f"Welcome back {user['fullname']}", user=user)


@router.api_route("/logout", methods=["GET", "POST"], response_model=MessageResponse)
async def logout(response: Response):
    """Clear the session cookie. Always succeeds."""
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully.")


@router.post("/profile/update", response_model=UserEnvelope)
def update_profile(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phoneNumber: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    user_id: str = Depends(get_current_user_id),
    uploader: FileUploader = Depends(get_uploader)
):
    """
    Update the current user's profile. Only provided fields are updated.

    The optional file is routed by type: images replace the avatar, PDFs the
    resume, anything else is kept as a generic upload.
    """
    update = ProfileUpdate(
        fullname=fullname, email=email, phoneNumber=phoneNumber, bio=bio, skills=skills
    )
    user = UserService().update_profile(user_id, update, read_upload(file), uploader)
    return UserEnvelope(message="Profile updated successfully.", user=user)
