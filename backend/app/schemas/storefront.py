"""Storefront Schemas — Pydantic models for the presentation-driver API.

Invariants:
    - Quantities at the HTTP boundary are >= 0 (negatives rejected with 400)
    - Prices serialized as strings with two decimals (no float drift)
    - Locale codes are free text here; unknown codes resolve to the default

Design Decisions:
    - from_* classmethods build responses from core dataclasses: routes stay thin
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, field_validator

from app.core.cart_state import CartLine
from app.core.catalog import Product


def _money(value: Decimal) -> str:
    return f"{value:.2f}"


class AddItemRequest(BaseModel):
    """POST /cart/items body."""
    product_id: str = Field(min_length=1, max_length=64)

    @field_validator("product_id")
    @classmethod
    def strip_product_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("product_id cannot be empty or whitespace")
        return v


class SetQuantityRequest(BaseModel):
    """PUT /cart/items/{product_id} body — 0 removes the line."""
    quantity: int = Field(ge=0, le=999)


class LocaleUpdate(BaseModel):
    """PUT /locale body."""
    code: str = Field(max_length=16)


class ProductResponse(BaseModel):
    id: str
    name: str
    price: Decimal
    condition: str
    size: str
    material: str
    image: str = ""
    is_favorite: bool = False

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> str:
        return _money(price)

    @classmethod
    def from_product(cls, product: Product, is_favorite: bool = False) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            condition=product.condition,
            size=product.size,
            material=product.material,
            image=product.image,
            is_favorite=is_favorite,
        )


class CartLineResponse(BaseModel):
    product: ProductResponse
    quantity: int
    subtotal: Decimal

    @field_serializer("subtotal")
    def serialize_subtotal(self, subtotal: Decimal) -> str:
        return _money(subtotal)

    @classmethod
    def from_line(cls, line: CartLine, is_favorite: bool = False) -> "CartLineResponse":
        return cls(
            product=ProductResponse.from_product(line.product, is_favorite),
            quantity=line.quantity,
            subtotal=line.subtotal,
        )


class CartResponse(BaseModel):
    lines: list[CartLineResponse]
    total_items: int
    total_price: Decimal
    message: str | None = None

    @field_serializer("total_price")
    def serialize_total(self, total: Decimal) -> str:
        return _money(total)


class FavoriteToggleResponse(BaseModel):
    product_id: str
    is_favorite: bool


class LanguageOption(BaseModel):
    code: str
    name: str
    flag: str


class LocaleResponse(BaseModel):
    locale: str
    languages: list[LanguageOption]


class TranslationResponse(BaseModel):
    key: str
    text: str
    locale: str


class ThemeResponse(BaseModel):
    dark_mode: bool
    theme: str
