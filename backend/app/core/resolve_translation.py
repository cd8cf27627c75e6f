"""Resolve Translation — dotted key-path lookup against an in-memory locale bundle.

Invariants:
    - Pure: no IO, no mutation of the bundle
    - Never raises for a missing key — returns the key path unchanged
    - Only a str leaf is a hit; a sub-mapping or any other value is a miss
    - A string met before the last segment aborts the walk (miss)

Design Decisions:
    - Returning the raw key is the visible "missing translation" signal (no exception type)
    - Bundle is typed as Mapping so JSON-loaded dicts and frozen views both work
"""

from collections.abc import Callable, Mapping
from typing import Any

Bundle = Mapping[str, Any]

_SEPARATOR = "."


def resolve_key(key: str, bundle: Bundle) -> str:
    """Walk `bundle` along the dotted `key`; return the leaf text or `key` itself."""
    node: Any = bundle
    for segment in key.split(_SEPARATOR):
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        else:
            return key
    return node if isinstance(node, str) else key


def make_translator(bundle: Bundle) -> Callable[[str], str]:
    """Bind a bundle into a `t(key)` callable for templates and catalog building."""

    def t(key: str) -> str:
        return resolve_key(key, bundle)

    return t


def format_added_to_cart(product_name: str, t: Callable[[str], str]) -> str:
    """Confirmation text shown after addItem, e.g. "Vintage Denim Jacket added to cart!"."""
    return f"{product_name} {t('messages.addedToCart')}"
