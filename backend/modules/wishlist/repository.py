"""
Wishlist repositories.

Both kinds of entry live in one table, partitioned by ``kind``. The two
dedup keys sit in separate columns, each with its own unique constraint:

    unique (owner_email, external_item_id)
    unique (owner_email, hotel_id)

SupabaseWishlistRepository lets those constraints decide duplicates.
InMemoryWishlistRepository mirrors them with key sets for local
development and tests.
"""

from typing import Any

from postgrest.exceptions import APIError
from supabase import AsyncClient

from shared.repository import BaseRepository

from .exceptions import DuplicateItemError
from .interfaces import IWishlistRepository
from .models import (
    RecommendationItem,
    WishlistEntry,
    WishlistItem,
    WishlistKind,
)


class SupabaseWishlistRepository(BaseRepository[WishlistItem], IWishlistRepository):
    """
    Wishlist entries stored in Supabase.

    Every method is a single PostgREST request filtered on owner_email.
    Rows keep insertion order through an identity ``position`` column.
    """

    def __init__(self, db: AsyncClient, table: str = "wishlist") -> None:
        super().__init__(db, table)

    async def insert_item(self, item: WishlistItem) -> WishlistItem:
        row = {
            "id": item.internal_id,
            "kind": WishlistKind.ITEM.value,
            "owner_email": item.owner_email,
            "external_item_id": item.external_item_id,
            "payload": item.payload,
            "created_at": item.created_at.isoformat(),
        }
        query = self._db.table(self._table).insert(row)
        try:
            result = await self._execute(
                query, "insert_item",
                owner_email=item.owner_email,
                external_item_id=item.external_item_id,
            )
        except APIError as e:
            # _execute only lets unique violations through
            raise DuplicateItemError(item.external_item_id) from e

        if not result.data:
            return item
        return self._map_to_item(result.data[0])

    async def insert_recommendation(self, item: RecommendationItem) -> bool:
        row = {
            "id": item.internal_id,
            "kind": WishlistKind.RECOMMENDATION.value,
            "owner_email": item.owner_email,
            "hotel_id": item.hotel_id,
            "name": item.name,
            "payload": item.payload,
            "created_at": item.created_at.isoformat(),
        }
        # ON CONFLICT DO NOTHING: an existing row comes back as an empty result
        query = self._db.table(self._table).upsert(
            row,
            on_conflict="owner_email,hotel_id",
            ignore_duplicates=True,
        )
        result = await self._execute(
            query, "insert_recommendation",
            owner_email=item.owner_email,
            hotel_id=item.hotel_id,
        )
        return bool(result.data)

    async def list_for_owner(self, owner_email: str) -> list[WishlistEntry]:
        query = (
            self._db.table(self._table)
            .select("*")
            .eq("owner_email", owner_email)
            .order("position")
        )
        result = await self._execute(query, "list_items", owner_email=owner_email)
        return [self._map_to_entry(row) for row in result.data]

    async def delete_for_owner(self, owner_email: str, internal_id: str) -> bool:
        query = (
            self._db.table(self._table)
            .delete()
            .eq("id", internal_id)
            .eq("owner_email", owner_email)
        )
        result = await self._execute(
            query, "delete_item",
            owner_email=owner_email,
            internal_id=internal_id,
        )
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_entry(self, data: dict[str, Any]) -> WishlistEntry:
        """Map database row to the model for its kind."""
        if data.get("kind") == WishlistKind.RECOMMENDATION.value:
            return self._map_to_recommendation(data)
        return self._map_to_item(data)

    def _map_to_item(self, data: dict[str, Any]) -> WishlistItem:
        return WishlistItem(
            internal_id=str(data["id"]),
            external_item_id=data["external_item_id"],
            owner_email=data["owner_email"],
            payload=data.get("payload") or {},
            created_at=data["created_at"],
        )

    def _map_to_recommendation(self, data: dict[str, Any]) -> RecommendationItem:
        return RecommendationItem(
            internal_id=str(data["id"]),
            hotel_id=data["hotel_id"],
            name=data["name"],
            owner_email=data["owner_email"],
            payload=data.get("payload") or {},
            created_at=data["created_at"],
        )


class InMemoryWishlistRepository(IWishlistRepository):
    """
    Wishlist entries held in insertion-ordered dicts.

    Each method checks and writes without awaiting in between, which
    makes it atomic on the event loop.
    """

    def __init__(self) -> None:
        self._entries: dict[str, WishlistEntry] = {}
        self._item_keys: set[tuple[str, str]] = set()
        self._hotel_keys: set[tuple[str, str]] = set()

    async def insert_item(self, item: WishlistItem) -> WishlistItem:
        key = (item.owner_email, item.external_item_id)
        if key in self._item_keys:
            raise DuplicateItemError(item.external_item_id)
        self._item_keys.add(key)
        self._entries[item.internal_id] = item
        return item

    async def insert_recommendation(self, item: RecommendationItem) -> bool:
        key = (item.owner_email, item.hotel_id)
        if key in self._hotel_keys:
            return False
        self._hotel_keys.add(key)
        self._entries[item.internal_id] = item
        return True

    async def list_for_owner(self, owner_email: str) -> list[WishlistEntry]:
        return [e for e in self._entries.values() if e.owner_email == owner_email]

    async def delete_for_owner(self, owner_email: str, internal_id: str) -> bool:
        entry = self._entries.get(internal_id)
        if entry is None or entry.owner_email != owner_email:
            return False
        del self._entries[internal_id]
        if isinstance(entry, RecommendationItem):
            self._hotel_keys.discard((entry.owner_email, entry.hotel_id))
        else:
            self._item_keys.discard((entry.owner_email, entry.external_item_id))
        return True
