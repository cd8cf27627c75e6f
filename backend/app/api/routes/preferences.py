"""Preferences — locale selection and persisted theme flag.

Invariants:
    - PUT /locale never fails for an unknown code: the default locale is served
    - Theme flag read from and written to the preference store on every call
    - POST /theme/toggle writes before responding

Design Decisions:
    - Locale is session state (in memory); theme is the only durable preference
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import LANGUAGE_MENU
from app.core.theme import encode_theme
from app.infrastructure.database import get_db
from app.infrastructure.preference_store import SqlPreferenceRepository
from app.schemas.storefront import (
    LanguageOption, LocaleResponse, LocaleUpdate, ThemeResponse,
)
from app.services.storefront_session import StorefrontSession, get_storefront
from app.services.theme_preference import load_dark_mode, toggle_theme

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["preferences"])


def _locale_response(storefront: StorefrontSession) -> LocaleResponse:
    return LocaleResponse(
        locale=storefront.locale.active_locale.value,
        languages=[
            LanguageOption(code=locale.value, **entry)
            for locale, entry in LANGUAGE_MENU.items()
        ],
    )


@router.get("/locale", response_model=LocaleResponse)
async def get_locale(storefront: StorefrontSession = Depends(get_storefront)):
    return _locale_response(storefront)


@router.put("/locale", response_model=LocaleResponse)
async def switch_locale(
    body: LocaleUpdate,
    storefront: StorefrontSession = Depends(get_storefront),
):
    """Switch the active bundle; unsupported codes resolve to the default."""
    await storefront.switch_locale(body.code)
    return _locale_response(storefront)


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(db: AsyncSession = Depends(get_db)):
    dark = await load_dark_mode(SqlPreferenceRepository(db))
    return ThemeResponse(dark_mode=dark, theme=encode_theme(dark))


@router.post("/theme/toggle", response_model=ThemeResponse)
async def toggle_theme_preference(db: AsyncSession = Depends(get_db)):
    dark = await toggle_theme(SqlPreferenceRepository(db))
    return ThemeResponse(dark_mode=dark, theme=encode_theme(dark))
