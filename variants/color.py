"""Color value type used by color variants."""
from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """An sRGB color with an optional alpha channel."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Color channels must be integers in 0..255, got {channel!r}")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional)."""

        if not isinstance(value, str):
            raise TypeError(f"Expected a hex color string, got {type(value).__name__}")
        match = _HEX_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")
        rgb, alpha = match.groups()
        return cls(
            red=int(rgb[0:2], 16),
            green=int(rgb[2:4], 16),
            blue=int(rgb[4:6], 16),
            alpha=int(alpha, 16) if alpha else 255,
        )

    @property
    def hex(self) -> str:
        base = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.alpha != 255:
            base += f"{self.alpha:02X}"
        return base

    def __str__(self) -> str:
        return self.hex


__all__ = ["Color"]
