"""
Users module.

Handles profile upsert keyed by normalized email, and the session
endpoints that issue tokens for those profiles.

Public API:
- IUserDirectory: Interface for profile operations
- UserDirectory: Validating directory over a repository
- User, UpsertResult: Models
- UserNotFoundError: Raised for unknown emails
"""

from .interfaces import IUserDirectory, IUserRepository
from .models import User, UpsertResult
from .service import UserDirectory, normalize_email
from .exceptions import UserNotFoundError

__all__ = [
    # Interfaces
    "IUserDirectory",
    "IUserRepository",
    # Service
    "UserDirectory",
    "normalize_email",
    # Models
    "User",
    "UpsertResult",
    # Exceptions
    "UserNotFoundError",
]
