"""Immutable, point-in-time captures of the variants one consumer needs.

A consumer declares the values it reads as a frozen dataclass::

    @dataclass(frozen=True)
    class HomeScreenVariants(VariantSnapshot):
        button_color: Color
        show_image: bool

    variants = HomeScreenVariants.capture(registry.get("home"))

Every field names an accessor on the group; use
``field(metadata={"accessor": "..."})`` when the names differ.  The values are
read once, against one frozen view of the source, and never change again.
"""
from __future__ import annotations

import copy
import dataclasses
from typing import Any, Dict, Type, TypeVar

from variants.groups.base import TestGroup

S = TypeVar("S", bound="VariantSnapshot")

ACCESSOR_METADATA = "accessor"


@dataclasses.dataclass(frozen=True)
class VariantSnapshot:
    """Base class for consumer-specific variant snapshots."""

    @classmethod
    def capture(cls: Type[S], group: TestGroup) -> S:
        if "__dataclass_fields__" not in vars(cls):
            raise TypeError(f"{cls.__name__} must be declared as a dataclass")
        pinned = group.pinned()
        values: Dict[str, Any] = {}
        for item in dataclasses.fields(cls):
            if not item.init:
                continue
            accessor_name = item.metadata.get(ACCESSOR_METADATA, item.name)
            accessor = getattr(pinned, accessor_name, None)
            if not callable(accessor):
                raise AttributeError(
                    f"{type(group).__name__} has no variant accessor {accessor_name!r} "
                    f"required by {cls.__name__}.{item.name}"
                )
            values[item.name] = copy.deepcopy(accessor())
        return cls(**values)

    def as_dict(self) -> Dict[str, Any]:
        return {
            item.name: copy.deepcopy(getattr(self, item.name))
            for item in dataclasses.fields(self)
        }


__all__ = ["ACCESSOR_METADATA", "VariantSnapshot"]
