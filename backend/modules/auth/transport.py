"""
Session transport.

Reads the session token from a request (cookie first, then bearer
header) and writes or clears the session cookie on responses.
"""

from typing import Any, Optional

from fastapi import Request, Response
from fastapi.security.utils import get_authorization_scheme_param


class SessionTransport:
    """Moves session tokens between HTTP messages and the codec."""

    def __init__(self, cookie_name: str, secure: bool, max_age: int):
        """
        Args:
            cookie_name: Name of the session cookie
            secure: Production-like context (HTTPS, cross-site cookies)
            max_age: Cookie lifetime in seconds
        """
        self._cookie_name = cookie_name
        self._secure = secure
        self._max_age = max_age

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def extract(self, request: Request) -> Optional[str]:
        """Return the raw token from the cookie or bearer header, if any."""
        cookie = request.cookies.get(self._cookie_name)
        if cookie:
            return cookie

        scheme, credentials = get_authorization_scheme_param(
            request.headers.get("Authorization")
        )
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
        return None

    def attach(self, response: Response, token: str) -> None:
        """Set the session cookie on a response."""
        response.set_cookie(
            self._cookie_name,
            token,
            max_age=self._max_age,
            **self._cookie_attributes(),
        )

    def clear(self, response: Response) -> None:
        """Clear the session cookie with the same attributes it was set with."""
        response.delete_cookie(self._cookie_name, **self._cookie_attributes())

    def _cookie_attributes(self) -> dict[str, Any]:
        # Shared by attach() and clear(); browsers only drop a cookie
        # when the clearing attributes match.
        return {
            "path": "/",
            "httponly": True,
            "secure": self._secure,
            "samesite": "none" if self._secure else "lax",
        }
