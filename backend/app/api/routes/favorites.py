"""Favorites — toggle and list liked product ids."""

from fastapi import APIRouter, Depends

from app.schemas.storefront import FavoriteToggleResponse
from app.services.storefront_session import StorefrontSession, get_storefront

router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(
    storefront: StorefrontSession = Depends(get_storefront),
):
    return {"favorites": list(storefront.favorites)}


@router.post("/{product_id}/toggle", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    product_id: str,
    storefront: StorefrontSession = Depends(get_storefront),
):
    """Flip membership; applying twice restores the previous state."""
    return FavoriteToggleResponse(
        product_id=product_id,
        is_favorite=storefront.toggle_favorite(product_id),
    )
