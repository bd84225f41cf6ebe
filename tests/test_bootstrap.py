from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from common.config import VariantSettings
from variants import HomeTestGroup, build_registry, build_source
from variants.errors import VariantTypeConflictError
from variants.sources import InMemoryVariantSource


@pytest.fixture(autouse=True)
def _no_variant_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("VARIANT"):
            monkeypatch.delenv(name, raising=False)


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assignments = tmp_path / "variants.yaml"
    assignments.write_text('home_button_color: "#FF0000"\nimage: false\n', encoding="utf-8")
    monkeypatch.setenv("VARIANT_IMAGE", "true")
    registry = build_registry(VariantSettings(variants_file=assignments))
    group = registry.get("home")
    assert isinstance(group, HomeTestGroup)
    assert group.button_color().hex == "#FF0000"
    assert group.show_image() is True


def test_source_without_file_uses_env_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AB_HOME_HEADLINE", "Hola")
    source = build_source(VariantSettings(env_prefix="AB_"))
    assert source.variant("home_headline", None) == "Hola"
    assert source.variant("image", "unset") == "unset"


def test_explicit_source_and_strict_types() -> None:
    source = InMemoryVariantSource({"image": True})
    registry = build_registry(VariantSettings(strict_types=True), source=source)
    group = registry.get("home")
    assert group.show_image() is True
    resolver = group._resolver
    with pytest.raises(VariantTypeConflictError):
        resolver.resolve("image", "yes")
