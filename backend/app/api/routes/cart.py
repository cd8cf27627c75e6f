"""Cart — presentation-driver endpoints over the in-memory cart engine.

Invariants:
    - Every response carries the full cart (lines, total_items, total_price)
    - Only POST /cart/items creates lines; PUT on a missing line is a no-op
    - PUT with quantity 0 removes the line; DELETE on a missing line is a no-op

Design Decisions:
    - Idempotent PUT/DELETE return 200 with the cart instead of 404 — the engine
      treats absent lines as a no-op, and the API mirrors that
"""

import logging

from fastapi import APIRouter, Depends, status

from app.schemas.storefront import (
    AddItemRequest, CartLineResponse, CartResponse, SetQuantityRequest,
)
from app.services.storefront_session import StorefrontSession, get_storefront

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cart", tags=["cart"])


def build_cart_response(
    storefront: StorefrontSession, message: str | None = None,
) -> CartResponse:
    return CartResponse(
        lines=[
            CartLineResponse.from_line(
                line, storefront.is_favorite(line.product.id),
            )
            for line in storefront.lines
        ],
        total_items=storefront.total_item_count(),
        total_price=storefront.total_price(),
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(storefront: StorefrontSession = Depends(get_storefront)):
    return build_cart_response(storefront)


@router.post(
    "/items", response_model=CartResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_item(
    body: AddItemRequest,
    storefront: StorefrontSession = Depends(get_storefront),
):
    """Add one unit of a catalog product. Response includes the confirmation text."""
    message = storefront.add_item(body.product_id)
    return build_cart_response(storefront, message)


@router.put("/items/{product_id}", response_model=CartResponse)
async def set_quantity(
    product_id: str,
    body: SetQuantityRequest,
    storefront: StorefrontSession = Depends(get_storefront),
):
    storefront.set_quantity(product_id, body.quantity)
    return build_cart_response(storefront)


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_item(
    product_id: str,
    storefront: StorefrontSession = Depends(get_storefront),
):
    storefront.remove_item(product_id)
    return build_cart_response(storefront)
