"""Wiring of settings, sources and the registry for an application."""
from __future__ import annotations

from typing import Iterable, Optional

from common.config import VariantSettings, load_settings
from common.logging import get_logger
from variants.groups import DEFAULT_GROUPS, TestGroup
from variants.registry import TestRegistry
from variants.resolver import VariantResolver
from variants.sources import EnvVariantSource, LayeredVariantSource, VariantSource, YamlVariantSource

LOGGER = get_logger(__name__)


def build_source(settings: VariantSettings) -> VariantSource:
    """Environment overrides layered over the optional assignments file."""

    layers: list[VariantSource] = [EnvVariantSource(settings.env_prefix)]
    if settings.variants_file is not None:
        layers.append(YamlVariantSource(settings.variants_file))
    return LayeredVariantSource(*layers)


def register_default_groups(
    registry: TestRegistry,
    groups: Iterable[type[TestGroup]] = DEFAULT_GROUPS,
) -> TestRegistry:
    for group_cls in groups:
        registry.register_group(group_cls)
    return registry


def build_registry(
    settings: Optional[VariantSettings] = None,
    source: Optional[VariantSource] = None,
) -> TestRegistry:
    settings = settings or load_settings()
    if source is None:
        source = build_source(settings)
    resolver = VariantResolver(source, strict_types=settings.strict_types)
    registry = register_default_groups(TestRegistry(resolver))
    LOGGER.debug("Registry ready with groups %s over %r", registry.registered(), source)
    return registry


__all__ = ["build_registry", "build_source", "register_default_groups"]
