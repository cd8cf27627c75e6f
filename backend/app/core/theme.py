"""Theme — dark/light flag encoding for the persisted preference.

Invariants:
    - Only the exact stored value "dark" reads as dark mode
    - Absent or unrecognized values read as light mode
"""

from app.core.domain_types import Theme


def is_dark(stored: str | None) -> bool:
    return stored == Theme.DARK.value


def encode_theme(dark: bool) -> str:
    return Theme.DARK.value if dark else Theme.LIGHT.value
