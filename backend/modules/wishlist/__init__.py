"""
Wishlist module.

Owner-scoped, deduplicated saved items. Plain items reject duplicates
with a conflict; recommendations treat a repeat save as a no-op.

Public API:
- IWishlistService: Interface for wishlist operations
- WishlistService: Validating service over a repository
- WishlistItem, RecommendationItem, WishlistEntry: Models
- DuplicateItemError, ItemNotFoundError: Exceptions
"""

from .interfaces import IWishlistService, IWishlistRepository
from .models import (
    WishlistKind,
    WishlistItem,
    RecommendationItem,
    RecommendationResult,
    WishlistEntry,
)
from .service import WishlistService
from .exceptions import DuplicateItemError, ItemNotFoundError

__all__ = [
    # Interfaces
    "IWishlistService",
    "IWishlistRepository",
    # Service
    "WishlistService",
    # Models
    "WishlistKind",
    "WishlistItem",
    "RecommendationItem",
    "RecommendationResult",
    "WishlistEntry",
    # Exceptions
    "DuplicateItemError",
    "ItemNotFoundError",
]
