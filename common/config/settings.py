"""Runtime settings for variant sources and resolution.

Values come from ``config/variants.ini`` when present and are then
overridden by environment variables:

* ``VARIANTS_FILE`` – YAML file with variant assignments.
* ``VARIANTS_ENV_PREFIX`` – prefix of environment overrides (``VARIANT_``).
* ``VARIANTS_STRICT_TYPES`` – raise when one key is read with two types.
* ``VARIANTS_LOG_LEVEL`` – log level name for the ``variants`` loggers.
"""
from __future__ import annotations

import configparser
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from common.paths import get_settings_path

DEFAULT_ENV_PREFIX = "VARIANT_"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "on"}
    return bool(value)


@dataclass(frozen=True)
class VariantSettings:
    """Container for variant resolution settings."""

    variants_file: Optional[Path] = None
    env_prefix: str = DEFAULT_ENV_PREFIX
    strict_types: bool = False
    log_level: Optional[str] = None


def _read_ini(path: Path) -> VariantSettings:
    settings = VariantSettings()
    if not path.exists():
        return settings
    parser = configparser.ConfigParser()
    parser.read(path, encoding="utf-8")
    if not parser.has_section("variants"):
        return settings
    section = parser["variants"]
    raw_file = section.get("file", fallback="").strip()
    if raw_file:
        candidate = Path(raw_file)
        if not candidate.is_absolute():
            candidate = path.parent / candidate
        settings = replace(settings, variants_file=candidate)
    prefix = section.get("env_prefix", fallback="").strip()
    if prefix:
        settings = replace(settings, env_prefix=prefix)
    if section.get("strict_types") is not None:
        settings = replace(settings, strict_types=_as_bool(section.get("strict_types")))
    level = section.get("log_level", fallback="").strip()
    if level:
        settings = replace(settings, log_level=level)
    return settings


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VariantSettings:
    """Return settings from the INI file with environment overrides applied."""

    env = os.environ if environ is None else environ
    settings = _read_ini(path or get_settings_path())
    raw_file = (env.get("VARIANTS_FILE") or "").strip()
    if raw_file:
        settings = replace(settings, variants_file=Path(raw_file))
    prefix = (env.get("VARIANTS_ENV_PREFIX") or "").strip()
    if prefix:
        settings = replace(settings, env_prefix=prefix)
    strict = env.get("VARIANTS_STRICT_TYPES")
    if strict is not None and strict.strip():
        settings = replace(settings, strict_types=_as_bool(strict))
    level = (env.get("VARIANTS_LOG_LEVEL") or "").strip()
    if level:
        settings = replace(settings, log_level=level)
    return settings
