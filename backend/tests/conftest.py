"""Root conftest — shared test configuration."""

import os

import pytest

# Keep tests off any developer .env database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def en_bundle() -> dict:
    """Small English bundle mirroring the shipped key layout."""
    return {
        "nav": {"home": "Home", "shop": "Shop"},
        "products": {"addToCart": "Add to Cart"},
        "productData": {
            "vintageDenim": "Vintage Denim Jacket",
            "woolSweater": "Wool Sweater",
            "silkDress": "Silk Dress",
            "leatherBoots": "Leather Boots",
            "excellent": "Excellent",
            "good": "Good",
            "cotton": "Cotton",
            "wool": "Wool",
            "silk": "Silk",
            "leather": "Leather",
        },
        "messages": {"addedToCart": "added to cart!"},
    }
