"""
Session token codec.

Issues and verifies signed, time-bounded JWTs whose subject is the
visitor's normalized email. Verification is local: signature and
expiry only, no store round-trip.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .exceptions import ExpiredTokenError, InvalidSignatureError, MalformedTokenError
from .models import TokenPayload


class TokenCodec:
    """Creates and verifies session tokens with a process-wide secret."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise RuntimeError(
                "Session secret not configured. Set the SESSION_SECRET environment variable."
            )
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    @property
    def ttl(self) -> timedelta:
        """Default token lifetime."""
        return self._ttl

    def issue(self, subject_email: str, ttl: Optional[timedelta] = None) -> str:
        """
        Create a signed token for a subject.

        Args:
            subject_email: Normalized email the token is bound to
            ttl: Lifetime override; defaults to the configured lifetime

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        payload = TokenPayload(
            sub=subject_email,
            iat=int(now.timestamp()),
            exp=int((now + (ttl or self._ttl)).timestamp()),
        )
        return jwt.encode(payload.model_dump(), self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return its subject email.

        Raises:
            ExpiredTokenError: Token is past its expiry
            InvalidSignatureError: Token was not signed with our secret
            MalformedTokenError: Token cannot be decoded or lacks claims
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            raise InvalidSignatureError()
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Session token is malformed: {e}")

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise MalformedTokenError("Session token has no subject")
        return subject
