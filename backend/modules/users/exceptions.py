"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when no profile exists for an email."""

    def __init__(self, email: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"email": email},
        )
