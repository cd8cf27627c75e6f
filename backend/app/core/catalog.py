"""Catalog — immutable product records and the localizable seed catalog.

Invariants:
    - Product is frozen: the core never mutates a catalog entry
    - price is a non-negative Decimal (no float rounding in totals)
    - Product ids are unique within a catalog
    - Display name, condition and material are translation keys on the seed,
      resolved against the active bundle when the catalog is built

Design Decisions:
    - ProductSeed/Product split: seeds are locale-independent, Products are the
      snapshot a caller sees (and what CartState copies at add time)
    - Seed catalog is a module-level tuple: fixed, ordered, provided at session start
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal

from app.core.domain_types import ProductId


@dataclass(frozen=True)
class Product:
    """Catalog record as displayed — immutable snapshot."""
    id: ProductId
    name: str
    price: Decimal
    condition: str
    size: str
    material: str
    image: str = ""

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")


@dataclass(frozen=True)
class ProductSeed:
    """Locale-independent catalog template; *_key fields are bundle key paths."""
    id: ProductId
    name_key: str
    price: Decimal
    condition_key: str
    size: str
    material_key: str
    image: str = ""

    def localize(self, t: Callable[[str], str]) -> Product:
        return Product(
            id=self.id,
            name=t(self.name_key),
            price=self.price,
            condition=t(self.condition_key),
            size=self.size,
            material=t(self.material_key),
            image=self.image,
        )


SEED_CATALOG: tuple[ProductSeed, ...] = (
    ProductSeed(
        ProductId("1"), "productData.vintageDenim", Decimal("89.99"),
        "productData.excellent", "M", "productData.cotton",
    ),
    ProductSeed(
        ProductId("2"), "productData.woolSweater", Decimal("65.50"),
        "productData.good", "L", "productData.wool",
    ),
    ProductSeed(
        ProductId("3"), "productData.silkDress", Decimal("125.00"),
        "productData.excellent", "S", "productData.silk",
    ),
    ProductSeed(
        ProductId("4"), "productData.leatherBoots", Decimal("199.99"),
        "productData.good", "42", "productData.leather",
    ),
)


def build_catalog(
    t: Callable[[str], str],
    seeds: Iterable[ProductSeed] = SEED_CATALOG,
) -> list[Product]:
    """Localize every seed in order against translator `t`."""
    return [seed.localize(t) for seed in seeds]


def find_product(catalog: Iterable[Product], product_id: str) -> Product | None:
    for product in catalog:
        if product.id == product_id:
            return product
    return None
