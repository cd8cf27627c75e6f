"""Preference Store — SQLAlchemy implementation of PreferenceRepository.

Invariants:
    - set() upserts: one row per key, value replaced in place
    - set() commits immediately (written on every toggle)
    - get() returns None when the key was never written
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.preference import Preference

logger = logging.getLogger(__name__)


class SqlPreferenceRepository:
    """PreferenceRepository over the `preferences` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get(self, key: str) -> str | None:
        result = await self._db.execute(
            select(Preference.value).where(Preference.key == key),
        )
        return result.scalar_one_or_none()

    async def set(self, key: str, value: str) -> None:
        row = await self._db.get(Preference, key)
        if row is None:
            self._db.add(Preference(key=key, value=value))
        else:
            row.value = value
        await self._db.commit()
        logger.debug(f"Preference '{key}' set to '{value}'")
