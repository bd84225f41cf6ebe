"""Exception types raised by the variant resolution layer.

Only programmer and configuration errors are raised.  Missing or mistyped
assignments never surface as exceptions; they resolve to the default.
"""
from __future__ import annotations


class VariantError(Exception):
    """Base class for variant resolution errors."""


class InvalidVariantKeyError(VariantError, ValueError):
    """Raised when a variant key is empty or not a string."""


class VariantTypeConflictError(VariantError, TypeError):
    """Raised when one key is read with defaults of two different types."""

    def __init__(self, key: str, declared: type, requested: type) -> None:
        super().__init__(
            f"Variant {key!r} was declared as {declared.__name__} "
            f"but read as {requested.__name__}"
        )
        self.key = key
        self.declared = declared
        self.requested = requested


class DuplicateVariantKeyError(VariantError, ValueError):
    """Raised when a test group declares the same key twice."""


class UnknownTestGroupError(VariantError, KeyError):
    """Raised when the registry is asked for a group nobody registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateTestGroupError(VariantError, ValueError):
    """Raised when a group id is registered twice."""


class VariantSourceError(VariantError, RuntimeError):
    """Raised when a file-backed variant source cannot be loaded."""


__all__ = [
    "DuplicateTestGroupError",
    "DuplicateVariantKeyError",
    "InvalidVariantKeyError",
    "UnknownTestGroupError",
    "VariantError",
    "VariantSourceError",
    "VariantTypeConflictError",
]
