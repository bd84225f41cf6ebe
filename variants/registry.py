"""Registry that builds one test group per feature, lazily and at most once."""
from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional

from common.logging import get_logger
from variants.errors import DuplicateTestGroupError, UnknownTestGroupError
from variants.groups.base import TestGroup
from variants.resolver import VariantResolver

LOGGER = get_logger(__name__)

GroupFactory = Callable[[VariantResolver], TestGroup]


def _normalize(group_id: str) -> str:
    return (group_id or "").strip().lower()


class TestRegistry:
    """Single access point for the application's test groups.

    Groups are registered up front and constructed on first ``get``.  The
    instance table is guarded by one lock, so concurrent first calls for the
    same id share a single construction.
    """

    __test__ = False

    def __init__(self, resolver: VariantResolver) -> None:
        self._resolver = resolver
        self._factories: Dict[str, GroupFactory] = {}
        self._instances: Dict[str, TestGroup] = {}
        self._lock = threading.RLock()

    def register(self, group_id: str, factory: GroupFactory) -> None:
        """Add ``factory`` to the registration table.

        Factories run under the registry lock, which is reentrant: a factory
        may ``get`` other groups, but not the group it is building.
        """

        key = _normalize(group_id)
        if not key:
            raise ValueError("group_id must be a non-empty string")
        with self._lock:
            if key in self._factories:
                raise DuplicateTestGroupError(f"Test group {key!r} is already registered")
            self._factories[key] = factory

    def register_group(self, group_cls: type[TestGroup]) -> None:
        """Register a ``TestGroup`` subclass under its ``group_id``."""

        self.register(group_cls.group_id, group_cls)

    def get(self, group_id: str) -> TestGroup:
        key = _normalize(group_id)
        instance = self._instances.get(key)
        if instance is not None:
            return instance
        with self._lock:
            instance = self._instances.get(key)
            if instance is not None:
                return instance
            factory = self._factories.get(key)
            if factory is None:
                raise UnknownTestGroupError(
                    f"No test group registered for {group_id!r}; known: {sorted(self._factories)}"
                )
            instance = factory(self._resolver)
            self._instances[key] = instance
        LOGGER.debug("Constructed test group %s", key)
        return instance

    def registered(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def is_built(self, group_id: str) -> bool:
        return _normalize(group_id) in self._instances

    def invalidate(self, group_id: Optional[str] = None) -> None:
        """Forget built instances so the next ``get`` constructs them again."""

        with self._lock:
            if group_id is None:
                self._instances.clear()
            else:
                self._instances.pop(_normalize(group_id), None)

    def __contains__(self, group_id: object) -> bool:
        return isinstance(group_id, str) and _normalize(group_id) in self._factories


__all__ = ["GroupFactory", "TestRegistry"]
