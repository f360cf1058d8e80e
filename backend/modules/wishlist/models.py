"""
Wishlist module data models.

Two item kinds share one collection:
- WishlistItem: a plain saved listing, unique per (owner, external item id)
- RecommendationItem: a saved recommended hotel, unique per (owner, hotel id)
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from shared.models import APIModel

# Body keys that would claim an owner; ownership comes from the session only
OWNER_KEYS = frozenset({"email", "ownerEmail", "owner_email"})

# Accepted spellings of the identifying field of each request body
ITEM_ID_KEYS = ("externalItemId", "external_item_id", "id")
HOTEL_ID_KEYS = ("hotelId", "hotel_id")


class WishlistKind(str, Enum):
    """Partition of the wishlist collection."""

    ITEM = "item"
    RECOMMENDATION = "recommendation"


class WishlistItem(APIModel):
    """A plain saved item."""

    kind: Literal["item"] = "item"
    internal_id: str = Field(..., description="Generated identifier (UUID)")
    external_item_id: str = Field(..., description="Identifier of the saved listing")
    owner_email: str = Field(..., description="Normalized email of the owner")
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class RecommendationItem(APIModel):
    """A saved recommendation."""

    kind: Literal["recommendation"] = "recommendation"
    internal_id: str = Field(..., description="Generated identifier (UUID)")
    hotel_id: str = Field(..., description="Identifier of the recommended hotel")
    name: str = Field(..., description="Hotel display name")
    owner_email: str = Field(..., description="Normalized email of the owner")
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


WishlistEntry = Annotated[
    Union[WishlistItem, RecommendationItem],
    Field(discriminator="kind"),
]


class RecommendationResult(BaseModel):
    """Outcome of saving a recommendation."""

    already_present: bool
    item: Optional[RecommendationItem] = None


def _coerce_identifier(value: Any) -> Any:
    # Listing ids may arrive as JSON numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _payload_from_extra(
    extra: Optional[dict[str, Any]],
    identifier_keys: tuple[str, ...],
) -> dict[str, Any]:
    excluded = OWNER_KEYS.union(identifier_keys)
    return {k: v for k, v in (extra or {}).items() if k not in excluded}


class AddItemRequest(BaseModel):
    """
    Body of POST /wishlist.

    The external id may be sent as ``externalItemId`` or ``id``;
    all other keys become the payload.
    """

    model_config = ConfigDict(extra="allow")

    external_item_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(*ITEM_ID_KEYS),
    )

    coerce_identifier = field_validator("external_item_id", mode="before")(_coerce_identifier)

    @property
    def payload(self) -> dict[str, Any]:
        return _payload_from_extra(self.model_extra, ITEM_ID_KEYS)


class AddRecommendationRequest(BaseModel):
    """Body of POST /wishlist-recommend."""

    model_config = ConfigDict(extra="allow")

    hotel_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(*HOTEL_ID_KEYS),
    )
    name: Optional[str] = None

    coerce_identifier = field_validator("hotel_id", mode="before")(_coerce_identifier)

    @property
    def payload(self) -> dict[str, Any]:
        return _payload_from_extra(self.model_extra, HOTEL_ID_KEYS)


class AddItemResponse(APIModel):
    internal_id: str


class AddRecommendationResponse(APIModel):
    already_present: bool
    internal_id: Optional[str] = None
    message: Optional[str] = None


class DeleteResponse(APIModel):
    deleted: bool = True
