"""RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Color", "rgb", "rgba", "DEFAULT_ALPHA"]

DEFAULT_ALPHA = 0xFF


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = DEFAULT_ALPHA

    def __post_init__(self) -> None:
        for name, value in zip("rgba", self.as_tuple()):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"colour channel {name}={value} is outside 0..255")

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return the channels as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)

    def hex_value(self) -> int:
        """Return the colour packed as ``0xRRGGBBAA``."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @property
    def opaque(self) -> bool:
        """True when the colour has full alpha."""
        return self.a == DEFAULT_ALPHA


def rgb(r: int, g: int, b: int) -> Color:
    """Build a fully opaque colour."""
    return Color(r, g, b, DEFAULT_ALPHA)


def rgba(r: int, g: int, b: int, a: int) -> Color:
    """Build a colour with an explicit alpha."""
    return Color(r, g, b, a)