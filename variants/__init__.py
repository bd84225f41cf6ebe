"""Typed A/B test variant resolution.

Test groups bundle the variants of one feature, a registry hands out one
group per feature, and snapshots freeze the values a consumer needs.
"""

from .bootstrap import build_registry, build_source, register_default_groups
from .color import Color
from .errors import (
    DuplicateTestGroupError,
    DuplicateVariantKeyError,
    InvalidVariantKeyError,
    UnknownTestGroupError,
    VariantError,
    VariantSourceError,
    VariantTypeConflictError,
)
from .groups import HomeTestGroup, TestGroup, VariantDefinition
from .registry import TestRegistry
from .resolver import VariantResolver
from .snapshot import VariantSnapshot

__all__ = [
    "Color",
    "DuplicateTestGroupError",
    "DuplicateVariantKeyError",
    "HomeTestGroup",
    "InvalidVariantKeyError",
    "TestGroup",
    "TestRegistry",
    "UnknownTestGroupError",
    "VariantDefinition",
    "VariantError",
    "VariantResolver",
    "VariantSnapshot",
    "VariantSourceError",
    "VariantTypeConflictError",
    "build_registry",
    "build_source",
    "register_default_groups",
]

__version__ = "0.1.0"
