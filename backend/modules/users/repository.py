"""
User profile repositories.

SupabaseUserRepository relies on the ``upsert_user_profile`` database
function (INSERT ... ON CONFLICT (email) DO UPDATE), so the existence
check and the write are a single statement.
InMemoryUserRepository is for local development and tests.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from supabase import AsyncClient

from shared.repository import BaseRepository

from .interfaces import IUserRepository
from .models import UpsertResult, User


class SupabaseUserRepository(BaseRepository[User], IUserRepository):
    """User profiles stored in Supabase."""

    def __init__(self, db: AsyncClient, table: str = "users") -> None:
        super().__init__(db, table)

    async def upsert(self, email: str, profile: dict[str, Any]) -> UpsertResult:
        query = self._db.rpc(
            "upsert_user_profile",
            {"p_email": email, "p_profile": profile},
        )
        result = await self._execute(query, "upsert_user", email=email)
        row = result.data[0]
        return UpsertResult(created=bool(row["created"]), user=self._map_to_user(row))

    async def get(self, email: str) -> Optional[User]:
        query = self._db.table(self._table).select("*").eq("email", email).limit(1)
        result = await self._execute(query, "get_user", email=email)
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            email=data["email"],
            profile=data.get("profile") or {},
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class InMemoryUserRepository(IUserRepository):
    """
    User profiles held in a dict.

    upsert() has no await between reading and writing the dict, so it
    is atomic on the event loop.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def upsert(self, email: str, profile: dict[str, Any]) -> UpsertResult:
        now = datetime.now(timezone.utc)
        existing = self._users.get(email)
        user = User(
            email=email,
            profile=dict(profile),
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self._users[email] = user
        return UpsertResult(created=existing is None, user=user)

    async def get(self, email: str) -> Optional[User]:
        return self._users.get(email)
