"""Service test fixtures — async DB, storefront session + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Every test gets a fresh StorefrontSession loaded with the shipped bundles

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - get_storefront overridden rather than reset: routes share one session
      per test and tests can inspect it directly
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.locale_bundles import LocaleBundleLoader
from app.services.storefront_session import StorefrontSession, get_storefront
import app.infrastructure.database as db_module
from app.models.preference import Preference  # noqa: F401
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def bundle_loader() -> LocaleBundleLoader:
    return LocaleBundleLoader(get_settings().translations_dir)


@pytest.fixture
async def storefront(bundle_loader) -> StorefrontSession:
    session = StorefrontSession(bundle_loader)
    await session.switch_locale("en")
    return session


@pytest.fixture
async def client(test_engine, test_session_factory, storefront):
    """FastAPI test client with DB and storefront dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    async def override_get_storefront():
        return storefront

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storefront] = override_get_storefront

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
