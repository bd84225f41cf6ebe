"""Typed variant lookups with default fallback.

``VariantResolver.resolve(key, default)`` never fails because of experiment
data: a missing assignment, a value of the wrong type or a source that
raises all resolve to ``default``.  Only programmer errors (an empty key, one
key read with two different types) are raised.
"""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Set, TypeVar

from common.logging import get_logger
from variants.coercion import coerce
from variants.errors import InvalidVariantKeyError, VariantTypeConflictError
from variants.sources.base import MISSING, VariantSource, freeze_source

LOGGER = get_logger(__name__)

T = TypeVar("T")


class _TypeLedger:
    """Records the type each key was first read with, plus warned keys."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._types: Dict[str, type] = {}
        self._warned: Set[str] = set()

    def declare(self, key: str, requested: type) -> Optional[type]:
        """Return the conflicting declared type, or ``None`` when consistent."""

        with self._lock:
            declared = self._types.setdefault(key, requested)
        return None if declared is requested else declared

    def declared(self, key: str) -> Optional[type]:
        with self._lock:
            return self._types.get(key)

    def first_warning(self, key: str) -> bool:
        with self._lock:
            if key in self._warned:
                return False
            self._warned.add(key)
            return True


class VariantResolver:
    """Typed lookup wrapper around a variant source."""

    def __init__(
        self,
        source: VariantSource,
        *,
        strict_types: bool = False,
        _ledger: Optional[_TypeLedger] = None,
    ) -> None:
        self.source = source
        self.strict_types = strict_types
        self._ledger = _ledger or _TypeLedger()

    def resolve(self, key: str, default: T) -> T:
        """Return the assignment for ``key`` as the type of ``default``, else ``default``."""

        if not isinstance(key, str) or not key.strip():
            raise InvalidVariantKeyError(f"Variant key must be a non-empty string, got {key!r}")
        self._check_type(key, default)

        try:
            raw = self.source.variant(key, MISSING)
        except Exception:
            LOGGER.warning("Variant source failed for %s; using default", key, exc_info=True)
            return default
        if raw is MISSING:
            LOGGER.debug("No assignment for %s; using default %r", key, default)
            return default

        try:
            return coerce(raw, default)
        except Exception as exc:
            if self._ledger.first_warning(key):
                LOGGER.warning(
                    "Variant %s=%r does not convert to %s (%s); using default %r",
                    key,
                    raw,
                    type(default).__name__,
                    exc,
                    default,
                )
            return default

    def declared_type(self, key: str) -> Optional[type]:
        """Type the key was first resolved with, if it has been resolved."""

        return self._ledger.declared(key)

    def pinned(self) -> "VariantResolver":
        """Return a resolver reading one frozen view of the current source state."""

        return VariantResolver(
            freeze_source(self.source),
            strict_types=self.strict_types,
            _ledger=self._ledger,
        )

    def _check_type(self, key: str, default: Any) -> None:
        conflict = self._ledger.declare(key, type(default))
        if conflict is None:
            return
        if self.strict_types:
            raise VariantTypeConflictError(key, conflict, type(default))
        if self._ledger.first_warning(f"type:{key}"):
            LOGGER.warning(
                "Variant %s declared as %s but read as %s",
                key,
                conflict.__name__,
                type(default).__name__,
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r}, strict_types={self.strict_types})"


__all__ = ["VariantResolver"]
