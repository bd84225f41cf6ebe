"""Test group base class.

A test group bundles the variants of one feature or screen.  Keys and
defaults are declared once as ``VariantDefinition`` class attributes and each
variant is read through a plain accessor method::

    class CheckoutTestGroup(TestGroup):
        group_id = "checkout"

        CTA_LABEL = VariantDefinition("checkout_cta_label", "Buy now")

        def cta_label(self) -> str:
            return self._resolve(self.CTA_LABEL)
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Generic, Tuple, TypeVar

from variants.errors import DuplicateVariantKeyError, InvalidVariantKeyError
from variants.resolver import VariantResolver

T = TypeVar("T")


@dataclass(frozen=True)
class VariantDefinition(Generic[T]):
    """One experiment dimension: its stable key and typed default."""

    key: str
    default: T
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise InvalidVariantKeyError(f"Variant key must be a non-empty string, got {self.key!r}")

    @property
    def value_type(self) -> type:
        return type(self.default)


class TestGroup:
    """Base class for per-feature variant bundles."""

    __test__ = False

    group_id: ClassVar[str] = ""
    _definitions: ClassVar[Tuple[VariantDefinition[Any], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        collected: Dict[str, VariantDefinition[Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, VariantDefinition):
                    collected[name] = value
        seen: Dict[str, str] = {}
        for name, definition in collected.items():
            if definition.key in seen:
                raise DuplicateVariantKeyError(
                    f"{cls.__name__} declares key {definition.key!r} "
                    f"twice ({seen[definition.key]} and {name})"
                )
            seen[definition.key] = name
        cls._definitions = tuple(collected.values())

    def __init__(self, resolver: VariantResolver) -> None:
        self._resolver = resolver

    @classmethod
    def definitions(cls) -> Tuple[VariantDefinition[Any], ...]:
        """Declared variants in declaration order."""

        return cls._definitions

    def _resolve(self, definition: VariantDefinition[T]) -> T:
        return self._resolver.resolve(definition.key, definition.default)

    def resolve_all(self) -> Dict[str, Any]:
        """Resolve every declared variant against one frozen source view."""

        pinned = self.pinned()
        return {definition.key: pinned._resolve(definition) for definition in self._definitions}

    def pinned(self) -> "TestGroup":
        """Copy of this group whose reads all observe the same source state."""

        clone = copy.copy(self)
        clone._resolver = self._resolver.pinned()
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(group_id={self.group_id!r})"
