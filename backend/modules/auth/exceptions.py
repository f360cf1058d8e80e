"""
Authentication module exceptions.

Token failures (expired, malformed, bad signature) are distinguished
for logging. The guard collapses all of them into InvalidCredentialError
before anything reaches an API response.
"""

from shared.exceptions import TravlingError, AuthenticationError, AuthorizationError


class TokenError(TravlingError):
    """Base class for session token verification failures."""

    pass


class ExpiredTokenError(TokenError):
    """Raised when a session token has expired."""

    def __init__(self, message: str = "Session token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MalformedTokenError(TokenError):
    """Raised when a session token cannot be decoded or lacks required claims."""

    def __init__(self, message: str = "Session token is malformed"):
        super().__init__(message, code="TOKEN_MALFORMED")


class InvalidSignatureError(TokenError):
    """Raised when a session token's signature does not match."""

    def __init__(self, message: str = "Session token signature is invalid"):
        super().__init__(message, code="TOKEN_BAD_SIGNATURE")


class MissingTokenError(AuthenticationError):
    """Raised when no session token is supplied."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="UNAUTHENTICATED")


class InvalidCredentialError(AuthorizationError):
    """Raised when a supplied session token fails verification."""

    def __init__(self, message: str = "Invalid or expired session"):
        super().__init__(message, code="INVALID_CREDENTIAL")
