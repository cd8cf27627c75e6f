"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, core functions that use the
      results stay synchronous
"""

from dataclasses import dataclass
from typing import Protocol

from app.core.domain_types import Locale
from app.core.resolve_translation import Bundle


@dataclass(frozen=True)
class LoadedBundle:
    """Result of a bundle load — the locale actually served and its tree."""
    locale: Locale
    bundle: Bundle
    fell_back: bool = False


class BundleSource(Protocol):
    """Contract for locale bundle retrieval — implemented by shell."""
    async def load(self, code: str | None) -> LoadedBundle: ...


class PreferenceRepository(Protocol):
    """Contract for durable key/value preferences — implemented by shell."""
    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> None: ...
