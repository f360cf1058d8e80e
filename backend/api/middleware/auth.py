"""
Session authentication dependencies.

Every per-owner route depends on get_current_user; the owner identity
it returns is the only one handlers may use.
"""

from fastapi import Depends, Request

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service


async def get_current_user(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a valid session.

    Raises MissingTokenError (401) when no token is supplied and
    InvalidCredentialError (403) when it does not verify.

    Usage:
        @router.get("/wishlist")
        async def list_items(user: AuthenticatedUser = Depends(get_current_user)):
            ...
    """
    return auth.authenticate(request)
