"""Second Hand Storefront API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StorefrontError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and default locale bundle initialized on startup via lifespan
    - A SQLite database gets its tables on startup; server databases run alembic

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Default bundle loaded at startup so a missing bundle fails fast instead of
      on the first request
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.routes import cart, catalog, favorites, health, preferences
from app.config import get_settings
from app.infrastructure.database import init_db, is_sqlite
from app.infrastructure.observability import setup_logging
from app.services.storefront_session import get_storefront

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if is_sqlite(settings.database_url):
        await manager.create_tables()
    storefront = await get_storefront()
    logger.info(
        "Storefront API started",
        extra={"locale": storefront.locale.active_locale.value},
    )
    yield
    logger.info("Storefront API shutting down")


app = FastAPI(
    title="Second Hand Storefront API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(cart.router)
app.include_router(favorites.router)
app.include_router(preferences.router)

register_error_handlers(app)

# Static storefront build, mounted last so /api/v1/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
