"""
Wishlist module interfaces.

IWishlistService is what routes depend on. IWishlistRepository is the
storage contract behind it; every uniqueness rule is enforced inside a
single repository call, never by a read followed by a write.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import RecommendationItem, RecommendationResult, WishlistEntry, WishlistItem


@runtime_checkable
class IWishlistRepository(Protocol):
    """Owner-scoped storage for wishlist entries."""

    async def insert_item(self, item: WishlistItem) -> WishlistItem:
        """
        Store a plain item.

        Raises:
            DuplicateItemError: (owner, external item id) already stored
        """
        ...

    async def insert_recommendation(self, item: RecommendationItem) -> bool:
        """
        Store a recommendation unless (owner, hotel id) already exists.

        Returns:
            True if inserted, False if it was already present
        """
        ...

    async def list_for_owner(self, owner_email: str) -> list[WishlistEntry]:
        """Return the owner's entries in insertion order."""
        ...

    async def delete_for_owner(self, owner_email: str, internal_id: str) -> bool:
        """
        Delete an entry only if it belongs to the owner.

        Returns:
            True if an entry was deleted
        """
        ...


@runtime_checkable
class IWishlistService(Protocol):
    """Validated, owner-scoped wishlist operations."""

    async def add_item(
        self,
        owner_email: str,
        external_item_id: Optional[str],
        payload: dict[str, Any],
    ) -> WishlistItem:
        """
        Save a plain item.

        Raises:
            ValidationError: external_item_id missing
            DuplicateItemError: Already saved by this owner
        """
        ...

    async def add_recommendation(
        self,
        owner_email: str,
        hotel_id: Optional[str],
        name: Optional[str],
        payload: dict[str, Any],
    ) -> RecommendationResult:
        """
        Save a recommendation; repeating it is a successful no-op.

        Raises:
            ValidationError: hotel_id or name missing
        """
        ...

    async def list_items(self, owner_email: str) -> list[WishlistEntry]:
        """List the owner's entries, oldest first."""
        ...

    async def remove_item(self, owner_email: str, internal_id: str) -> None:
        """
        Delete one of the owner's entries.

        Raises:
            ValidationError: internal_id is not a valid identifier
            ItemNotFoundError: No such entry for this owner
        """
        ...
