"""Storefront Session — composes cart engine, locale state and catalog for one client.

Invariants:
    - One StorefrontSession per process (single-client storefront)
    - Every engine command runs to completion without awaiting
    - switch_locale is the only awaited operation; its result is installed
      only if no newer switch started meanwhile
    - Catalog products are localized against the active bundle on every read;
      cart lines keep the snapshot taken when the product was added

Design Decisions:
    - Module-level singleton (get_storefront): deliberate exception to the
      no-global-state rule — single-process uvicorn, state lost on restart,
      which matches the client-side cart it replaces
    - Loader injected (BundleSource Protocol) so tests can script slow/failing loads
"""

import logging
from decimal import Decimal

from app.config import get_settings
from app.core.cart_state import CartLine, CartState
from app.core.catalog import Product, build_catalog, find_product
from app.core.domain_types import Locale, ProductId
from app.core.errors import ProductNotFoundError
from app.core.locale_state import LocaleState
from app.core.repository_protocols import BundleSource
from app.core.resolve_translation import format_added_to_cart
from app.infrastructure.locale_bundles import LocaleBundleLoader

logger = logging.getLogger(__name__)


class StorefrontSession:
    """Explicit engine object behind the presentation driver."""

    def __init__(self, loader: BundleSource):
        self._loader = loader
        self.cart = CartState()
        self.locale = LocaleState()

    # --- Localization -------------------------------------------------------

    async def switch_locale(self, code: str | None) -> Locale:
        """Load the bundle for `code` (or the default) and make it active."""
        token = self.locale.begin_switch(code)
        try:
            loaded = await self._loader.load(code)
        except Exception:
            self.locale.abandon_switch(token)
            raise
        if self.locale.complete_switch(token, loaded.locale, loaded.bundle):
            logger.info(
                f"Locale switched to {loaded.locale.value}",
                extra={"locale": loaded.locale.value, "token": token},
            )
        return self.locale.active_locale

    def t(self, key: str) -> str:
        return self.locale.t(key)

    # --- Catalog ------------------------------------------------------------

    def products(self) -> list[Product]:
        return build_catalog(self.t)

    def get_product(self, product_id: str) -> Product:
        product = find_product(self.products(), product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    # --- Cart & favorites ---------------------------------------------------

    def add_item(self, product_id: str) -> str:
        """Add one unit of a catalog product; returns the confirmation message."""
        product = self.cart.add_item(self.get_product(product_id))
        logger.info(
            "Added to cart", extra={"product_id": product.id},
        )
        return format_added_to_cart(product.name, self.t)

    def remove_item(self, product_id: str) -> None:
        self.cart.remove_item(product_id)

    def set_quantity(self, product_id: str, quantity: int) -> None:
        self.cart.set_quantity(product_id, quantity)

    def toggle_favorite(self, product_id: str) -> bool:
        return self.cart.toggle_favorite(product_id)

    def is_favorite(self, product_id: str) -> bool:
        return self.cart.is_favorite(product_id)

    @property
    def favorites(self) -> tuple[ProductId, ...]:
        return self.cart.favorites

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self.cart.lines

    def total_item_count(self) -> int:
        return self.cart.total_item_count()

    def total_price(self) -> Decimal:
        return self.cart.total_price()


_storefront: StorefrontSession | None = None


def create_storefront() -> StorefrontSession:
    settings = get_settings()
    loader = LocaleBundleLoader(
        settings.translations_dir, default_locale=settings.default_locale,
    )
    return StorefrontSession(loader)


async def get_storefront() -> StorefrontSession:
    """FastAPI dependency — process-wide session, default bundle loaded on first use."""
    global _storefront
    if _storefront is None:
        _storefront = create_storefront()
    if not _storefront.locale.is_loaded:
        await _storefront.switch_locale(get_settings().default_locale.value)
    return _storefront


def reset_storefront() -> None:
    """Drop the process-wide session (tests, or an explicit cart reset)."""
    global _storefront
    _storefront = None
