"""
Authentication module.

Handles session token issuance and verification, token transport
(cookie or bearer header), and request admission.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Admission gate over TokenCodec and SessionTransport
- TokenCodec / SessionTransport: Building blocks
- Auth exceptions: MissingTokenError, InvalidCredentialError, token errors
"""

from .interfaces import IAuthService
from .models import TokenPayload
from .service import AuthService
from .tokens import TokenCodec
from .transport import SessionTransport
from .exceptions import (
    TokenError,
    ExpiredTokenError,
    MalformedTokenError,
    InvalidSignatureError,
    MissingTokenError,
    InvalidCredentialError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Implementations
    "AuthService",
    "TokenCodec",
    "SessionTransport",
    # Models
    "TokenPayload",
    # Exceptions
    "TokenError",
    "ExpiredTokenError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "MissingTokenError",
    "InvalidCredentialError",
]
