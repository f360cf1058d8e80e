"""
Wishlist API endpoints.

All routes require a session and only ever touch the caller's entries.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_wishlist_service
from api.middleware.auth import get_current_user
from api.models.errors import error_responses
from shared.models import AuthenticatedUser

from .interfaces import IWishlistService
from .models import (
    AddItemRequest,
    AddItemResponse,
    AddRecommendationRequest,
    AddRecommendationResponse,
    DeleteResponse,
    WishlistEntry,
)

router = APIRouter()


@router.post(
    "/wishlist",
    response_model=AddItemResponse,
    status_code=201,
    responses=error_responses(400, 401, 403, 409),
)
async def add_item(
    body: AddItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWishlistService = Depends(get_wishlist_service),
) -> AddItemResponse:
    """
    Save a listing to the caller's wishlist.

    Saving the same listing twice returns 409.
    """
    item = await service.add_item(user.email, body.external_item_id, body.payload)
    return AddItemResponse(internal_id=item.internal_id)


@router.post(
    "/wishlist-recommend",
    response_model=AddRecommendationResponse,
    response_model_exclude_none=True,
    status_code=201,
    responses=error_responses(400, 401, 403),
)
async def add_recommendation(
    body: AddRecommendationRequest,
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWishlistService = Depends(get_wishlist_service),
) -> AddRecommendationResponse:
    """
    Save a recommended hotel to the caller's wishlist.

    Repeating the call is not an error: it answers 200 with
    ``alreadyPresent: true`` instead of 201.
    """
    result = await service.add_recommendation(
        user.email, body.hotel_id, body.name, body.payload
    )
    if result.already_present:
        response.status_code = 200
        return AddRecommendationResponse(already_present=True, message="Already in wishlist")
    return AddRecommendationResponse(already_present=False, internal_id=result.item.internal_id)


@router.get(
    "/wishlist",
    response_model=list[WishlistEntry],
    responses=error_responses(401, 403),
)
async def list_items(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWishlistService = Depends(get_wishlist_service),
) -> list[WishlistEntry]:
    """
    List the caller's saved entries, oldest first.
    """
    return await service.list_items(user.email)


@router.delete(
    "/wishlist/{internal_id}",
    response_model=DeleteResponse,
    responses=error_responses(400, 401, 403, 404),
)
async def remove_item(
    internal_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWishlistService = Depends(get_wishlist_service),
) -> DeleteResponse:
    """
    Delete one of the caller's entries.

    Entries owned by someone else are reported as not found.
    """
    await service.remove_item(user.email, internal_id)
    return DeleteResponse()
