"""Cart State — in-memory cart & favorites engine for one storefront client.

Invariants:
    - At most one CartLine per product id; quantity >= 1 always
    - A line whose quantity would reach 0 is removed, never stored as zero
    - Lines keep first-add order; re-adding a product never reorders
    - Removing then re-adding a product yields quantity 1 (no resurrection)
    - set_quantity never creates a line — only add_item does
    - toggle_favorite is an involution
    - Prices are snapshots captured in the CartLine at add time

Design Decisions:
    - Dict keyed by ProductId: insertion-ordered, and updating a value keeps
      the key in place
    - Negative quantities are clamped to 0 (remove) rather than raised: the
      engine never fails the calling session; the HTTP schema rejects them earlier
    - Dataclass with explicit command/query methods — no IO, no async
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from app.core.catalog import Product
from app.core.domain_types import ProductId

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    """One product entry in the cart with its quantity."""
    product: Product
    quantity: int = 1

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass
class CartState:
    """Per-client cart and favorites — pure dataclass, no IO."""

    _lines: dict[ProductId, CartLine] = field(default_factory=dict)

    # dict used as an ordered set (stable iteration for the UI)
    _favorites: dict[ProductId, None] = field(default_factory=dict)

    # --- Cart commands ------------------------------------------------------

    def add_item(self, product: Product) -> Product:
        """Add one unit of `product`. Returns it so the caller can notify."""
        line = self._lines.get(product.id)
        if line is not None:
            line.quantity += 1
        else:
            self._lines[product.id] = CartLine(product=product, quantity=1)
        return product

    def remove_item(self, product_id: str) -> None:
        self._lines.pop(ProductId(product_id), None)

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Replace a line's quantity. 0 removes; missing lines are left alone."""
        if quantity < 0:
            logger.warning(
                f"Negative quantity {quantity} clamped to 0",
                extra={"product_id": product_id},
            )
            quantity = 0
        if quantity == 0:
            self.remove_item(product_id)
            return
        line = self._lines.get(ProductId(product_id))
        if line is not None:
            line.quantity = quantity

    def clear(self) -> None:
        self._lines.clear()

    # --- Favorites ----------------------------------------------------------

    def toggle_favorite(self, product_id: str) -> bool:
        """Flip membership. Returns True if the product is now a favorite."""
        pid = ProductId(product_id)
        if pid in self._favorites:
            del self._favorites[pid]
            return False
        self._favorites[pid] = None
        return True

    def is_favorite(self, product_id: str) -> bool:
        return product_id in self._favorites

    @property
    def favorites(self) -> tuple[ProductId, ...]:
        return tuple(self._favorites)

    # --- Queries ------------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, product_id: str) -> int:
        line = self._lines.get(ProductId(product_id))
        return line.quantity if line else 0

    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def total_price(self) -> Decimal:
        return sum(
            (line.subtotal for line in self._lines.values()), Decimal("0"),
        )
