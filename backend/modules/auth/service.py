"""
Authentication service implementation.

Admits requests carrying a valid session token and issues or clears
sessions on login and logout.
"""

import logging

from fastapi import Request, Response

from shared.models import AuthenticatedUser

from .exceptions import InvalidCredentialError, MissingTokenError, TokenError
from .interfaces import IAuthService
from .tokens import TokenCodec
from .transport import SessionTransport

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Request admission gate.

    Uses SessionTransport to find the token and TokenCodec to verify it.
    Verification failures are distinguished in logs but surface as a
    single InvalidCredentialError.
    """

    def __init__(self, codec: TokenCodec, transport: SessionTransport):
        self._codec = codec
        self._transport = transport

    def authenticate(self, request: Request) -> AuthenticatedUser:
        token = self._transport.extract(request)
        if not token:
            raise MissingTokenError()

        try:
            email = self._codec.verify(token)
        except TokenError as e:
            logger.info(
                "Rejected session token on %s %s: %s",
                request.method, request.url.path, e.code,
            )
            raise InvalidCredentialError() from e

        return AuthenticatedUser(email=email)

    def start_session(self, response: Response, email: str) -> str:
        token = self._codec.issue(email)
        self._transport.attach(response, token)
        logger.debug("Started session for %s", email)
        return token

    def end_session(self, response: Response) -> None:
        self._transport.clear(response)
