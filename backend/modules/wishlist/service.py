"""
Wishlist service.

Validates input, builds new entries and delegates storage to a repository.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from shared.exceptions import ValidationError

from .exceptions import ItemNotFoundError
from .interfaces import IWishlistRepository, IWishlistService
from .models import RecommendationItem, RecommendationResult, WishlistEntry, WishlistItem

logger = logging.getLogger(__name__)


def _require(value: Optional[str], field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(
            f"{field} is required",
            code="INVALID_WISHLIST_DATA",
            details={"field": field},
        )
    return str(value).strip()


def parse_internal_id(internal_id: str) -> str:
    """
    Return the canonical form of an item identifier.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return str(uuid.UUID(internal_id))
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(
            "Invalid wishlist item id",
            code="INVALID_ITEM_ID",
            details={"internal_id": str(internal_id)},
        )


class WishlistService(IWishlistService):
    """
    Wishlist operations for an authenticated owner.

    The owner email always comes from the verified session.
    """

    def __init__(self, repository: IWishlistRepository):
        self._repository = repository

    async def add_item(
        self,
        owner_email: str,
        external_item_id: Optional[str],
        payload: dict[str, Any],
    ) -> WishlistItem:
        item = WishlistItem(
            internal_id=str(uuid.uuid4()),
            external_item_id=_require(external_item_id, "externalItemId"),
            owner_email=owner_email,
            payload=payload,
            created_at=datetime.now(timezone.utc),
        )
        stored = await self._repository.insert_item(item)
        logger.info("Saved wishlist item %s for %s", stored.internal_id, owner_email)
        return stored

    async def add_recommendation(
        self,
        owner_email: str,
        hotel_id: Optional[str],
        name: Optional[str],
        payload: dict[str, Any],
    ) -> RecommendationResult:
        item = RecommendationItem(
            internal_id=str(uuid.uuid4()),
            hotel_id=_require(hotel_id, "hotelId"),
            name=_require(name, "name"),
            owner_email=owner_email,
            payload=payload,
            created_at=datetime.now(timezone.utc),
        )
        inserted = await self._repository.insert_recommendation(item)
        if not inserted:
            logger.debug("Recommendation %s already saved for %s", item.hotel_id, owner_email)
            return RecommendationResult(already_present=True)
        return RecommendationResult(already_present=False, item=item)

    async def list_items(self, owner_email: str) -> list[WishlistEntry]:
        return await self._repository.list_for_owner(owner_email)

    async def remove_item(self, owner_email: str, internal_id: str) -> None:
        key = parse_internal_id(internal_id)
        if not await self._repository.delete_for_owner(owner_email, key):
            raise ItemNotFoundError(key)
        logger.info("Removed wishlist item %s for %s", key, owner_email)
