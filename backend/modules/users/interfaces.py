"""
Users module interfaces.

IUserDirectory is what routes depend on. IUserRepository is the storage
contract behind it; both Supabase and in-memory implementations exist.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import UpsertResult, User


@runtime_checkable
class IUserRepository(Protocol):
    """Storage for user profiles. Emails arrive already normalized."""

    async def upsert(self, email: str, profile: dict[str, Any]) -> UpsertResult:
        """
        Insert or update a profile in one atomic store operation.

        The original created_at must survive updates.
        """
        ...

    async def get(self, email: str) -> Optional[User]:
        """Fetch a profile by email, or None."""
        ...


@runtime_checkable
class IUserDirectory(Protocol):
    """Validated access to user profiles."""

    async def upsert(self, email: Optional[str], profile: dict[str, Any]) -> UpsertResult:
        """
        Create or update the profile for an email.

        Raises:
            ValidationError: Email missing or not an address
        """
        ...

    async def get(self, email: Optional[str]) -> User:
        """
        Fetch the profile for an email.

        Raises:
            ValidationError: Email missing or not an address
            UserNotFoundError: No profile stored for the email
        """
        ...
