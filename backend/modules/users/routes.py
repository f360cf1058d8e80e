"""
Session and profile endpoints.

POST /users registers or updates a profile and starts a session,
POST /jwt starts a session for a known email, POST /logout ends it.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_auth_service, get_user_directory
from api.middleware.auth import get_current_user
from api.models.errors import error_responses
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from .interfaces import IUserDirectory
from .models import (
    LoginRequest,
    SessionResponse,
    UpsertResponse,
    User,
    UserProfileRequest,
)

router = APIRouter()


@router.post("/users", response_model=UpsertResponse, responses=error_responses(400, 500))
async def upsert_user(
    body: UserProfileRequest,
    response: Response,
    users: IUserDirectory = Depends(get_user_directory),
    auth: IAuthService = Depends(get_auth_service),
) -> UpsertResponse:
    """
    Create or update the caller's profile and start a session.

    The session is bound to the normalized email.
    """
    result = await users.upsert(body.email, body.profile)
    auth.start_session(response, result.user.email)
    return UpsertResponse(created=result.created)


@router.post("/jwt", response_model=SessionResponse, responses=error_responses(400, 404))
async def issue_session(
    body: LoginRequest,
    response: Response,
    users: IUserDirectory = Depends(get_user_directory),
    auth: IAuthService = Depends(get_auth_service),
) -> SessionResponse:
    """
    Start a session for an already registered email.
    """
    user = await users.get(body.email)
    auth.start_session(response, user.email)
    return SessionResponse()


@router.post("/logout", response_model=SessionResponse)
async def logout(
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
) -> SessionResponse:
    """
    Clear the session cookie.
    """
    auth.end_session(response)
    return SessionResponse()


@router.get("/users/me", response_model=User, responses=error_responses(401, 403, 404))
async def get_current_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserDirectory = Depends(get_user_directory),
) -> User:
    """
    Get the current visitor's stored profile.
    """
    return await users.get(user.email)
