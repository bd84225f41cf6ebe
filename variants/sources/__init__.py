"""Variant source implementations."""

from .base import MISSING, MappingVariantSource, SnapshottableSource, VariantSource, freeze_source
from .env import EnvVariantSource
from .layered import LayeredVariantSource
from .memory import InMemoryVariantSource
from .yaml_file import YamlVariantSource, load_assignments

__all__ = [
    "MISSING",
    "EnvVariantSource",
    "InMemoryVariantSource",
    "LayeredVariantSource",
    "MappingVariantSource",
    "SnapshottableSource",
    "VariantSource",
    "YamlVariantSource",
    "freeze_source",
    "load_assignments",
]
