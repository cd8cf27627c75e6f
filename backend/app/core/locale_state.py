"""Locale State — active bundle tracking with stale-load protection.

Invariants:
    - is_loaded is False until the first bundle is installed
    - Keys are never resolved against an absent bundle (BundleNotLoadedError)
    - A completed load replaces the active bundle wholesale
    - Only the completion carrying the latest token is installed; older
      in-flight loads are discarded
    - While a switch is pending, the previous bundle (if any) stays active
    - A failed load releases its pending token (abandon_switch); nothing stays pending forever

Design Decisions:
    - Sequence token instead of cancellation: loads are cheap, last-requested wins
    - Pure dataclass; the shell awaits the loader between begin/complete
"""

import logging
from dataclasses import dataclass

from app.core.domain_types import Locale, DEFAULT_LOCALE, parse_locale
from app.core.errors import BundleNotLoadedError
from app.core.resolve_translation import Bundle, resolve_key

logger = logging.getLogger(__name__)


@dataclass
class LocaleState:
    """Active locale + bundle for one storefront client — pure dataclass, no IO."""

    active_locale: Locale = DEFAULT_LOCALE
    requested_locale: Locale = DEFAULT_LOCALE
    bundle: Bundle | None = None

    _latest_token: int = 0
    _pending_token: int | None = None

    @property
    def is_loaded(self) -> bool:
        return self.bundle is not None

    @property
    def is_pending(self) -> bool:
        return self._pending_token is not None

    def begin_switch(self, code: str | None) -> int:
        """Record a locale request; returns the token its completion must carry."""
        self._latest_token += 1
        self.requested_locale = parse_locale(code)
        self._pending_token = self._latest_token
        return self._latest_token

    def complete_switch(self, token: int, locale: Locale, bundle: Bundle) -> bool:
        """Install `bundle` if `token` is the latest request. Returns whether installed."""
        if token != self._latest_token:
            logger.info(
                f"Discarding stale locale load (token {token}, latest {self._latest_token})",
                extra={"locale": locale.value, "token": token},
            )
            return False
        self._pending_token = None
        self.active_locale = locale
        self.bundle = bundle
        return True

    def abandon_switch(self, token: int) -> None:
        """Release a switch whose load failed; the active bundle is kept."""
        if token != self._pending_token:
            return
        self._pending_token = None
        self.requested_locale = self.active_locale

    def t(self, key: str) -> str:
        if self.bundle is None:
            raise BundleNotLoadedError()
        return resolve_key(key, self.bundle)
