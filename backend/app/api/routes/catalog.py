"""Catalog & Translations — localized product listing and key resolution.

Invariants:
    - Products are localized against the active bundle on every request
    - GET /translations/{key} returns the key itself when no text exists (200, not 404)
"""

import logging

from fastapi import APIRouter, Depends

from app.schemas.storefront import ProductResponse, TranslationResponse
from app.services.storefront_session import StorefrontSession, get_storefront

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    storefront: StorefrontSession = Depends(get_storefront),
):
    """Localized catalog in display order, with favorite flags."""
    return [
        ProductResponse.from_product(p, storefront.is_favorite(p.id))
        for p in storefront.products()
    ]


@router.get("/translations/{key}", response_model=TranslationResponse)
async def resolve_translation(
    key: str, storefront: StorefrontSession = Depends(get_storefront),
):
    """Resolve a dotted key path against the active bundle."""
    return TranslationResponse(
        key=key,
        text=storefront.t(key),
        locale=storefront.locale.active_locale.value,
    )
