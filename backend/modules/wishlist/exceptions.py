"""
Wishlist module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class DuplicateItemError(ConflictError):
    """Raised when an owner saves the same external item twice."""

    def __init__(self, external_item_id: str):
        super().__init__(
            "Item already saved",
            code="ALREADY_SAVED",
            details={"external_item_id": external_item_id},
        )


class ItemNotFoundError(NotFoundError):
    """
    Raised when a delete target does not exist or belongs to someone else.

    Both cases produce the same error so callers cannot probe
    for other owners' items.
    """

    def __init__(self, internal_id: str):
        super().__init__(
            "Wishlist item not found",
            code="ITEM_NOT_FOUND",
            details={"internal_id": internal_id},
        )
