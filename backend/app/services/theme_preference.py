"""Theme Preference — read and toggle the persisted dark-mode flag.

Invariants:
    - Flag is stored under THEME_PREFERENCE_KEY as "dark" / "light"
    - Every toggle writes through to the repository
    - Absent preference reads as light mode
"""

import logging

from app.core.domain_types import THEME_PREFERENCE_KEY
from app.core.repository_protocols import PreferenceRepository
from app.core.theme import encode_theme, is_dark

logger = logging.getLogger(__name__)


async def load_dark_mode(repo: PreferenceRepository) -> bool:
    return is_dark(await repo.get(THEME_PREFERENCE_KEY))


async def toggle_theme(repo: PreferenceRepository) -> bool:
    """Flip the stored flag. Returns the new dark-mode value."""
    dark = not await load_dark_mode(repo)
    await repo.set(THEME_PREFERENCE_KEY, encode_theme(dark))
    logger.info(f"Theme set to {encode_theme(dark)}")
    return dark
