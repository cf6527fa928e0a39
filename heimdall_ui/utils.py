"""Small geometry helpers shared by the drawing code and the components."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Vec2", "Size2", "check_collision_box"]


@dataclass(frozen=True)
class Vec2:
    """A position on screen, in pixels."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size2:
    """A width and height, in pixels."""

    w: int = 0
    h: int = 0


def check_collision_box(
    x1: int, y1: int, w1: int, h1: int, x2: int, y2: int, w2: int, h2: int
) -> bool:
    """Return True when the two axis-aligned boxes overlap.

    Boxes that only touch along an edge do not collide.
    """
    return x1 + w1 > x2 and x1 < x2 + w2 and y1 + h1 > y2 and y1 < y2 + h2