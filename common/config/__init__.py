"""Configuration helpers for variant sources and runtime flags."""

from .settings import DEFAULT_ENV_PREFIX, VariantSettings, load_settings

__all__ = ["DEFAULT_ENV_PREFIX", "VariantSettings", "load_settings"]
