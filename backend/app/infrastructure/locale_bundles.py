"""Locale Bundles — asynchronous JSON bundle loader with default-locale fallback.

Invariants:
    - load() never fails for a requested locale: any miss or parse error
      substitutes the default bundle (logged at WARNING)
    - Unsupported locale codes go straight to the default bundle
    - Only a missing/broken DEFAULT bundle raises (BundleLoadError)
    - Successfully parsed bundles are cached per locale

Design Decisions:
    - File IO runs in a worker thread (asyncio.to_thread): the event loop that
      owns the cart engine is never blocked
    - One JSON file per locale named <code>.json — replaces runtime module import
"""

import asyncio
import json
import logging
from pathlib import Path

from app.core.domain_types import Locale, DEFAULT_LOCALE, parse_locale
from app.core.errors import BundleLoadError
from app.core.repository_protocols import LoadedBundle
from app.core.resolve_translation import Bundle

logger = logging.getLogger(__name__)


class InvalidBundleError(ValueError):
    """Bundle file parsed but is not a key→text tree."""


def _read_bundle_file(path: Path) -> Bundle:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise InvalidBundleError(f"{path.name}: root must be an object")
    return data


class LocaleBundleLoader:
    """Loads <translations_dir>/<locale>.json, falling back to the default locale."""

    def __init__(
        self, translations_dir: Path, default_locale: Locale = DEFAULT_LOCALE,
    ):
        self.translations_dir = Path(translations_dir)
        self.default_locale = default_locale
        self._cache: dict[Locale, Bundle] = {}

    def path_for(self, locale: Locale) -> Path:
        return self.translations_dir / f"{locale.value}.json"

    async def _read(self, locale: Locale) -> Bundle:
        cached = self._cache.get(locale)
        if cached is not None:
            return cached
        bundle = await asyncio.to_thread(_read_bundle_file, self.path_for(locale))
        self._cache[locale] = bundle
        return bundle

    async def load_default(self) -> LoadedBundle:
        try:
            bundle = await self._read(self.default_locale)
        except (OSError, ValueError) as e:
            logger.error(
                f"Default locale bundle unavailable: {e}",
                extra={"locale": self.default_locale.value},
            )
            raise BundleLoadError(self.default_locale.value, type(e).__name__)
        return LoadedBundle(locale=self.default_locale, bundle=bundle)

    async def load(self, code: str | None) -> LoadedBundle:
        """Load the bundle for `code`; any failure yields the default bundle."""
        locale = parse_locale(code)
        if locale is self.default_locale:
            return await self.load_default()
        try:
            bundle = await self._read(locale)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and InvalidBundleError are ValueErrors
            logger.warning(
                f"Locale bundle failed to load, using default: {e}",
                extra={"locale": locale.value},
            )
            fallback = await self.load_default()
            return LoadedBundle(
                locale=fallback.locale, bundle=fallback.bundle, fell_back=True,
            )
        return LoadedBundle(locale=locale, bundle=bundle)
