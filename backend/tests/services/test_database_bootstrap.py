"""Database Bootstrap — a fresh SQLite file is usable right after startup.

Invariants:
    - Lifespan startup creates the preferences table on a brand new SQLite file
    - create_tables is idempotent and keeps existing rows
    - Querying a database without the schema surfaces DatabaseError (503)
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

import app.infrastructure.database as db_module
import app.main as main_module
from app.config import Settings
from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager
from app.models.preference import Preference
from app.services.storefront_session import reset_storefront


@pytest.fixture
def fresh_db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'fresh.db'}"


@pytest.fixture
def fresh_app(fresh_db_url, monkeypatch):
    monkeypatch.setattr(
        main_module, "get_settings",
        lambda: Settings(database_url=fresh_db_url),
    )
    monkeypatch.setattr(db_module, "db_manager", db_module.db_manager)
    reset_storefront()
    yield main_module.app
    reset_storefront()


async def test_startup_creates_schema_on_fresh_sqlite_file(fresh_app):
    async with main_module.lifespan(fresh_app):
        async with AsyncClient(
            transport=ASGITransport(app=fresh_app), base_url="http://test",
        ) as client:
            res = await client.get("/api/v1/theme")
            assert res.status_code == 200
            assert res.json() == {"dark_mode": False, "theme": "light"}

            toggled = await client.post("/api/v1/theme/toggle")
            assert toggled.json()["dark_mode"] is True
            assert (await client.get("/api/v1/theme")).json()["theme"] == "dark"
        await db_module.db_manager.engine.dispose()


async def test_create_tables_is_idempotent(fresh_db_url):
    manager = DatabaseSessionManager(fresh_db_url)
    await manager.create_tables()
    async with manager.session() as db:
        db.add(Preference(key="theme", value="dark"))
        await db.commit()

    await manager.create_tables()
    async with manager.session() as db:
        row = (await db.execute(select(Preference))).scalar_one()
    assert row.value == "dark"
    await manager.engine.dispose()


async def test_query_without_schema_raises_database_error(fresh_db_url):
    manager = DatabaseSessionManager(fresh_db_url)
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(select(Preference))
    assert await manager.health_check() is True
    await manager.engine.dispose()
