"""Stack several variant sources; the first one with an assignment wins."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from variants.sources.base import MISSING, VariantSource, freeze_source


class LayeredVariantSource:
    def __init__(self, *sources: VariantSource) -> None:
        self.sources: Tuple[VariantSource, ...] = tuple(sources)

    def variant(self, key: str, default: Any) -> Any:
        for source in self.sources:
            value = source.variant(key, MISSING)
            if value is not MISSING:
                return value
        return default

    def state(self) -> Mapping[str, Any]:
        """Merged view; sources without ``state()`` contribute nothing."""

        merged: Dict[str, Any] = {}
        for source in reversed(self.sources):
            state = getattr(source, "state", None)
            if callable(state):
                merged.update(state())
        return MappingProxyType(merged)

    def freeze(self) -> "LayeredVariantSource":
        return LayeredVariantSource(*(freeze_source(source) for source in self.sources))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(s) for s in self.sources)})"
