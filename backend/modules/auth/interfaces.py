"""
Authentication module interface.

Routes depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from fastapi import Request, Response

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for session authentication.

    Combines token transport and verification into a request
    admission gate, and issues sessions on login.
    """

    def authenticate(self, request: Request) -> AuthenticatedUser:
        """
        Admit a request or reject it.

        Args:
            request: Inbound HTTP request

        Returns:
            AuthenticatedUser bound to the token subject

        Raises:
            MissingTokenError: No token in cookie or Authorization header
            InvalidCredentialError: Token present but not verifiable
        """
        ...

    def start_session(self, response: Response, email: str) -> str:
        """
        Issue a session token for an email and attach it to a response.

        Returns:
            The issued token
        """
        ...

    def end_session(self, response: Response) -> None:
        """Clear the session cookie on a response."""
        ...
