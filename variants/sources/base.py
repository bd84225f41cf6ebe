"""Variant source protocol and the simplest mapping-backed source."""
from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


class _Missing:
    """Sentinel marking an absent assignment."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@runtime_checkable
class VariantSource(Protocol):
    """Provider of raw variant assignments.

    ``variant`` must be safe to call from any thread and must not raise;
    when there is no assignment it returns ``default``.
    """

    def variant(self, key: str, default: Any) -> Any:
        ...


@runtime_checkable
class SnapshottableSource(VariantSource, Protocol):
    """A source that can hand out its whole current state at once."""

    def state(self) -> Mapping[str, Any]:
        ...


class MappingVariantSource:
    """Read-only source over a fixed mapping."""

    def __init__(self, assignments: Optional[Mapping[str, Any]] = None) -> None:
        self._state: Mapping[str, Any] = MappingProxyType(dict(assignments or {}))

    def variant(self, key: str, default: Any) -> Any:
        return self._state.get(key, default)

    def state(self) -> Mapping[str, Any]:
        return self._state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={sorted(self._state)})"


class _MemoizedSource:
    """Remembers the first raw read of every key from a source without ``state()``."""

    def __init__(self, source: VariantSource) -> None:
        self._source = source
        self._seen: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def variant(self, key: str, default: Any) -> Any:
        with self._lock:
            if key not in self._seen:
                self._seen[key] = self._source.variant(key, MISSING)
            value = self._seen[key]
        return default if value is MISSING else value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"


def freeze_source(source: VariantSource) -> VariantSource:
    """Return a view of ``source`` that no longer changes.

    Sources may provide their own ``freeze()``; otherwise ``state()`` is
    copied once, and as a last resort each key is read at most once.
    """

    freeze = getattr(source, "freeze", None)
    if callable(freeze):
        return freeze()
    if isinstance(source, SnapshottableSource):
        return MappingVariantSource(source.state())
    return _MemoizedSource(source)
