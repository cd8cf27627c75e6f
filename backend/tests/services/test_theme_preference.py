"""Theme Preference — persisted dark-mode flag over the SQL preference store.

Invariants:
    - Absent preference reads as light
    - Each toggle flips the flag and writes "dark"/"light" under key "theme"
    - Stored value survives a new repository/session (durable)
"""

from app.infrastructure.preference_store import SqlPreferenceRepository
from app.services.theme_preference import load_dark_mode, toggle_theme


class _MemoryRepo:
    def __init__(self, initial: dict | None = None):
        self.data = dict(initial or {})
        self.writes = 0

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value
        self.writes += 1


async def test_absent_preference_is_light():
    assert await load_dark_mode(_MemoryRepo()) is False


async def test_stored_dark_is_read_at_startup():
    assert await load_dark_mode(_MemoryRepo({"theme": "dark"})) is True


async def test_toggle_writes_on_every_call():
    repo = _MemoryRepo()
    assert await toggle_theme(repo) is True
    assert repo.data["theme"] == "dark"
    assert await toggle_theme(repo) is False
    assert repo.data["theme"] == "light"
    assert repo.writes == 2


async def test_sql_repository_get_missing_returns_none(test_db):
    assert await SqlPreferenceRepository(test_db).get("theme") is None


async def test_sql_repository_upserts(test_db):
    repo = SqlPreferenceRepository(test_db)
    await repo.set("theme", "dark")
    await repo.set("theme", "light")
    assert await repo.get("theme") == "light"


async def test_theme_survives_new_session(test_session_factory):
    async with test_session_factory() as db:
        await toggle_theme(SqlPreferenceRepository(db))
    async with test_session_factory() as db:
        assert await load_dark_mode(SqlPreferenceRepository(db)) is True
