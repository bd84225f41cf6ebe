"""Per-feature test groups."""

from .base import TestGroup, VariantDefinition
from .home import HomeTestGroup

DEFAULT_GROUPS = (HomeTestGroup,)

__all__ = ["DEFAULT_GROUPS", "HomeTestGroup", "TestGroup", "VariantDefinition"]
