"""
Base exception classes for the Travling backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to exactly one HTTP status code.
"""

from typing import Optional, Any


class TravlingError(Exception):
    """
    Base exception for all Travling errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(TravlingError):
    """Input validation failed (malformed or missing required field)."""

    status_code = 400


class AuthenticationError(TravlingError):
    """No credential was supplied."""

    status_code = 401


class AuthorizationError(TravlingError):
    """A credential was supplied but could not be verified."""

    status_code = 403


class NotFoundError(TravlingError):
    """Resource not found, or not visible to the caller."""

    status_code = 404


class ConflictError(TravlingError):
    """Write rejected because the record already exists."""

    status_code = 409


class StoreError(TravlingError):
    """
    Backing store failure.

    The message and details are kept for logs only; API responses
    render this as an opaque internal error.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        operation: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "STORE_ERROR", details)
        self.operation = operation
        self.details["operation"] = operation

    def to_dict(self) -> dict[str, Any]:
        """Opaque representation safe to return to API callers."""
        return {
            "error": self.code,
            "message": "Internal server error",
            "details": {},
        }
