"""Locale Bundles — loading, fallback to default and shipped bundle coverage.

Invariants:
    - Requested locale loads its own bundle when present and valid
    - Missing file, invalid JSON, or non-object root → default bundle (fell_back)
    - Unsupported code → default bundle
    - Missing default bundle → BundleLoadError
    - Shipped bundles define every key the English bundle defines
"""

import json

import pytest

from app.config import get_settings
from app.core.domain_types import Locale
from app.core.errors import BundleLoadError
from app.core.resolve_translation import resolve_key
from app.infrastructure.locale_bundles import LocaleBundleLoader


@pytest.fixture
def bundle_dir(tmp_path):
    (tmp_path / "en.json").write_text(
        json.dumps({"nav": {"home": "Home"}}), encoding="utf-8",
    )
    (tmp_path / "es.json").write_text(
        json.dumps({"nav": {"home": "Inicio"}}), encoding="utf-8",
    )
    return tmp_path


async def test_loads_requested_locale(bundle_dir):
    loaded = await LocaleBundleLoader(bundle_dir).load("es")
    assert loaded.locale is Locale.ES
    assert loaded.fell_back is False
    assert resolve_key("nav.home", loaded.bundle) == "Inicio"


async def test_code_is_case_insensitive(bundle_dir):
    loaded = await LocaleBundleLoader(bundle_dir).load("ES")
    assert loaded.locale is Locale.ES


async def test_missing_bundle_falls_back_to_default(bundle_dir):
    loaded = await LocaleBundleLoader(bundle_dir).load("ru")
    assert loaded.locale is Locale.EN
    assert loaded.fell_back is True
    assert resolve_key("nav.home", loaded.bundle) == "Home"


async def test_invalid_json_falls_back_to_default(bundle_dir):
    (bundle_dir / "pt.json").write_text("{not json", encoding="utf-8")
    loaded = await LocaleBundleLoader(bundle_dir).load("pt")
    assert loaded.locale is Locale.EN
    assert loaded.fell_back is True


async def test_non_object_root_falls_back_to_default(bundle_dir):
    (bundle_dir / "pt.json").write_text('["a", "b"]', encoding="utf-8")
    loaded = await LocaleBundleLoader(bundle_dir).load("pt")
    assert loaded.locale is Locale.EN


async def test_unsupported_code_resolves_to_default(bundle_dir):
    loaded = await LocaleBundleLoader(bundle_dir).load("fr")
    assert loaded.locale is Locale.EN
    assert resolve_key("nav.home", loaded.bundle) == "Home"


async def test_missing_default_bundle_raises(tmp_path):
    with pytest.raises(BundleLoadError):
        await LocaleBundleLoader(tmp_path).load("en")


async def test_missing_default_raises_even_when_falling_back(tmp_path):
    with pytest.raises(BundleLoadError):
        await LocaleBundleLoader(tmp_path).load("es")


async def test_bundles_are_cached(bundle_dir):
    loader = LocaleBundleLoader(bundle_dir)
    first = await loader.load("es")
    (bundle_dir / "es.json").unlink()
    second = await loader.load("es")
    assert second.bundle is first.bundle
    assert second.locale is Locale.ES


# --- Shipped bundles ----------------------------------------------------------


def _leaf_keys(tree: dict, prefix: str = "") -> set[str]:
    keys = set()
    for name, value in tree.items():
        path = f"{prefix}{name}"
        if isinstance(value, dict):
            keys |= _leaf_keys(value, f"{path}.")
        else:
            keys.add(path)
    return keys


@pytest.mark.parametrize("locale", list(Locale))
async def test_shipped_bundle_loads_without_fallback(locale):
    loaded = await LocaleBundleLoader(get_settings().translations_dir).load(locale.value)
    assert loaded.locale is locale
    assert loaded.fell_back is False


@pytest.mark.parametrize("locale", [Locale.ES, Locale.PT, Locale.RU])
async def test_shipped_bundle_covers_english_keys(locale):
    loader = LocaleBundleLoader(get_settings().translations_dir)
    english = _leaf_keys((await loader.load("en")).bundle)
    other = _leaf_keys((await loader.load(locale.value)).bundle)
    assert english - other == set()


async def test_unsupported_locale_matches_default_for_every_key():
    loader = LocaleBundleLoader(get_settings().translations_dir)
    english = (await loader.load("en")).bundle
    fallback = (await loader.load("de")).bundle
    for key in _leaf_keys(english):
        assert resolve_key(key, fallback) == resolve_key(key, english)
