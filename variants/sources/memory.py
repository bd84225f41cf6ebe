"""Mutable in-process variant source with immutable-swap reads."""
from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from common.logging import get_logger

LOGGER = get_logger(__name__)

Listener = Callable[[Mapping[str, Any]], None]


class InMemoryVariantSource:
    """Variant source that lives in memory and can be updated at runtime.

    Every write builds a new read-only mapping and swaps it in under a lock.
    Readers grab the current mapping reference without locking, so a reader
    always sees one complete state, never a half-applied update.
    """

    def __init__(self, assignments: Optional[Mapping[str, Any]] = None) -> None:
        self._state: Mapping[str, Any] = MappingProxyType(dict(assignments or {}))
        self._write_lock = threading.Lock()
        self._listeners: List[Listener] = []

    def variant(self, key: str, default: Any) -> Any:
        return self._state.get(key, default)

    def state(self) -> Mapping[str, Any]:
        return self._state

    def assign(self, key: str, value: Any) -> None:
        self._swap(lambda current: {**current, key: value})

    def assign_many(self, assignments: Mapping[str, Any]) -> None:
        self._swap(lambda current: {**current, **assignments})

    def remove(self, key: str) -> None:
        self._swap(lambda current: {k: v for k, v in current.items() if k != key})

    def replace(self, assignments: Mapping[str, Any]) -> None:
        self._swap(lambda current: dict(assignments))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state)`` after every update; returns an unsubscribe hook."""

        with self._write_lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._write_lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _swap(self, build: Callable[[Mapping[str, Any]], Dict[str, Any]]) -> None:
        with self._write_lock:
            new_state = MappingProxyType(build(self._state))
            self._state = new_state
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(new_state)
            except Exception:
                LOGGER.exception("Variant listener %r failed", listener)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={sorted(self._state)})"
