"""Conversion of raw variant values to the type of a caller's default.

The type of the default value declares the type of the variant.  Raw values
usually arrive as JSON/YAML scalars or strings, so a small set of lossless
string conversions is accepted.  Anything else raises ``TypeError`` or
``ValueError``; callers translate those into a fallback to the default.
"""
from __future__ import annotations

import dataclasses
import enum
import threading
from typing import Any, Callable, Dict, Mapping

from variants.color import Color

Coercer = Callable[[Any, Any], Any]

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}

_CUSTOM: Dict[type, Coercer] = {}
_CUSTOM_LOCK = threading.Lock()


def register_coercer(target: type, func: Coercer) -> None:
    """Register ``func(raw, default)`` for defaults that are instances of ``target``."""

    with _CUSTOM_LOCK:
        _CUSTOM[target] = func


def unregister_coercer(target: type) -> None:
    with _CUSTOM_LOCK:
        _CUSTOM.pop(target, None)


def _to_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"Not a boolean string: {raw!r}")
    raise TypeError(f"Expected bool, got {type(raw).__name__}")


def _to_int(raw: Any, default: int) -> int:
    if isinstance(raw, bool):
        raise TypeError("Expected int, got bool")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        raise ValueError(f"Expected an integral number, got {raw!r}")
    if isinstance(raw, str):
        return int(raw.strip())
    raise TypeError(f"Expected int, got {type(raw).__name__}")


def _to_float(raw: Any, default: float) -> float:
    if isinstance(raw, bool):
        raise TypeError("Expected float, got bool")
    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError as exc:
            raise ValueError(f"Number out of float range: {exc}") from exc
    if isinstance(raw, str):
        return float(raw.strip())
    raise TypeError(f"Expected float, got {type(raw).__name__}")


def _to_str(raw: Any, default: str) -> str:
    if isinstance(raw, str):
        return raw
    raise TypeError(f"Expected str, got {type(raw).__name__}")


def _to_color(raw: Any, default: Color) -> Color:
    if isinstance(raw, Color):
        return raw
    return Color.from_hex(raw)


def _to_enum(raw: Any, default: enum.Enum) -> enum.Enum:
    enum_cls = type(default)
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)
    except ValueError:
        if isinstance(raw, str) and raw in enum_cls.__members__:
            return enum_cls.__members__[raw]
        raise


def _to_dataclass(raw: Any, default: Any) -> Any:
    if type(raw) is type(default):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"Expected a mapping for {type(default).__name__}, got {type(raw).__name__}")
    names = {item.name for item in dataclasses.fields(default) if item.init}
    unknown = set(raw) - names
    if unknown:
        raise ValueError(f"Unknown fields for {type(default).__name__}: {sorted(unknown)}")
    updates = {name: coerce(value, getattr(default, name)) for name, value in raw.items()}
    return dataclasses.replace(default, **updates)


def _to_mapping(raw: Any, default: Mapping[Any, Any]) -> Dict[Any, Any]:
    if isinstance(raw, Mapping):
        return dict(raw)
    raise TypeError(f"Expected a mapping, got {type(raw).__name__}")


def _to_sequence(raw: Any, default: Any) -> Any:
    if isinstance(raw, (list, tuple)):
        return type(default)(raw)
    raise TypeError(f"Expected a sequence, got {type(raw).__name__}")


def _find_custom(target: type) -> Coercer | None:
    with _CUSTOM_LOCK:
        for klass in target.__mro__:
            if klass in _CUSTOM:
                return _CUSTOM[klass]
    return None


def coerce(raw: Any, default: Any) -> Any:
    """Return ``raw`` converted to the type of ``default``.

    Raises ``TypeError`` or ``ValueError`` when no conversion applies.  Custom coercers may
    raise anything; the resolver treats every exception as a failed conversion.
    """

    custom = _find_custom(type(default))
    if custom is not None:
        return custom(raw, default)
    if isinstance(default, bool):
        return _to_bool(raw, default)
    if isinstance(default, enum.Enum):
        return _to_enum(raw, default)
    if isinstance(default, int):
        return _to_int(raw, default)
    if isinstance(default, float):
        return _to_float(raw, default)
    if isinstance(default, str):
        return _to_str(raw, default)
    if isinstance(default, Color):
        return _to_color(raw, default)
    if dataclasses.is_dataclass(default) and not isinstance(default, type):
        return _to_dataclass(raw, default)
    if isinstance(default, Mapping):
        return _to_mapping(raw, default)
    if isinstance(default, (list, tuple)):
        return _to_sequence(raw, default)
    if isinstance(raw, type(default)):
        return raw
    raise TypeError(f"Cannot convert {type(raw).__name__} to {type(default).__name__}")


__all__ = ["coerce", "register_coercer", "unregister_coercer"]
