"""Path helpers to keep directory layout consistent."""
from __future__ import annotations

from pathlib import Path


def get_repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def get_config_dir() -> Path:
    return get_repo_root() / "config"


def get_settings_path() -> Path:
    return get_config_dir() / "variants.ini"
