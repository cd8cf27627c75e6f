"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps the catalog's string identifier — never use bare str in domain logic
    - Supported locales encoded as an Enum — no raw string matching outside parse_locale()
    - Any unrecognized locale code resolves to DEFAULT_LOCALE (never raises)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Supported storefront locales — value is the bundle file stem."""
    EN = "en"
    ES = "es"
    PT = "pt"
    RU = "ru"


class Theme(str, Enum):
    """Persisted theme values (stored as text under THEME_PREFERENCE_KEY)."""
    LIGHT = "light"
    DARK = "dark"


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_LOCALE = Locale.EN
THEME_PREFERENCE_KEY = "theme"

LANGUAGE_MENU: dict[Locale, dict[str, str]] = {
    Locale.EN: {"name": "English", "flag": "🇺🇸"},
    Locale.ES: {"name": "Español", "flag": "🇪🇸"},
    Locale.PT: {"name": "Português", "flag": "🇧🇷"},
    Locale.RU: {"name": "Русский", "flag": "🇷🇺"},
}


def parse_locale(code: str | None) -> Locale:
    """Map a user-supplied code ("EN", "pt", "fr", None) onto a supported Locale.

    Case-insensitive. Unknown codes fall back to DEFAULT_LOCALE.
    """
    if not code:
        return DEFAULT_LOCALE
    try:
        return Locale(code.strip().lower())
    except ValueError:
        return DEFAULT_LOCALE
