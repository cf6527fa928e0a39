"""Rectangle and circle drawing on pygame surfaces.

Opaque colours are written straight to the surface; translucent ones are
drawn on a scratch layer and blended on top.
"""

from __future__ import annotations

import os
from typing import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .rgb import Color  # noqa: E402
from .utils import Size2, Vec2  # noqa: E402

__all__ = [
    "circle_outline_points",
    "circle_span_lines",
    "rect_border_rects",
    "draw_fill_rect",
    "draw_rect",
    "draw_fill_circle",
    "draw_circle",
]

Point = tuple[int, int]
RectTuple = tuple[int, int, int, int]
_Painter = Callable[[pygame.Surface, int, int, tuple[int, int, int, int]], None]


def _midpoint_offsets(radius: int):
    """Yield ``(offset_x, offset_y)`` pairs of the midpoint circle walk."""
    if radius < 0:
        raise ValueError(f"radius must not be negative, got {radius}")
    d = radius - 1
    offset_y = radius
    offset_x = 0
    while offset_y >= offset_x:
        yield offset_x, offset_y
        if d >= 2 * offset_x:
            d -= 2 * offset_x + 1
            offset_x += 1
        elif d < 2 * (radius - offset_y):
            d += 2 * offset_y - 1
            offset_y -= 1
        else:
            d += 2 * (offset_y - offset_x - 1)
            offset_y -= 1
            offset_x += 1


def circle_outline_points(center: Vec2, radius: int) -> list[Point]:
    """Return the points of a circle outline, in drawing order."""
    cx, cy = center.x, center.y
    points: list[Point] = []
    for ox, oy in _midpoint_offsets(radius):
        points.extend(
            [
                (cx + ox, cy + oy),
                (cx + oy, cy + ox),
                (cx - ox, cy + oy),
                (cx - oy, cy + ox),
                (cx + ox, cy - oy),
                (cx + oy, cy - ox),
                (cx - ox, cy - oy),
                (cx - oy, cy - ox),
            ]
        )
    return points


def circle_span_lines(center: Vec2, radius: int) -> list[tuple[Point, Point]]:
    """Return the horizontal lines that fill a circle, as endpoint pairs."""
    cx, cy = center.x, center.y
    lines: list[tuple[Point, Point]] = []
    for ox, oy in _midpoint_offsets(radius):
        lines.extend(
            [
                ((cx - oy, cy + ox), (cx + oy, cy + ox)),
                ((cx - ox, cy + oy), (cx + ox, cy + oy)),
                ((cx - ox, cy - oy), (cx + ox, cy - oy)),
                ((cx - oy, cy - ox), (cx + oy, cy - ox)),
            ]
        )
    return lines


def rect_border_rects(pos: Vec2, size: Size2) -> list[RectTuple]:
    """Return the top, bottom, left and right one-pixel border strips."""
    x, y, w, h = pos.x, pos.y, size.w, size.h
    return [
        (x, y, w, 1),
        (x, y + h - 1, w, 1),
        (x, y, 1, h),
        (x + w - 1, y, 1, h),
    ]


def _require_surface(surface: pygame.Surface | None) -> pygame.Surface:
    if surface is None:
        raise ValueError("surface is None, couldn't draw on it")
    return surface


def _paint(surface: pygame.Surface, color: Color, bounds: pygame.Rect, painter: _Painter) -> None:
    rgba = color.as_tuple()
    if color.opaque:
        painter(surface, 0, 0, rgba)
        return
    layer = pygame.Surface((max(bounds.w, 0), max(bounds.h, 0)), pygame.SRCALPHA)
    painter(layer, -bounds.x, -bounds.y, rgba)
    surface.blit(layer, bounds.topleft)


def draw_fill_rect(surface: pygame.Surface, pos: Vec2, size: Size2, color: Color) -> None:
    """Fill a rectangle."""
    surface = _require_surface(surface)
    bounds = pygame.Rect(pos.x, pos.y, max(size.w, 0), max(size.h, 0))

    def painter(target, dx, dy, rgba):
        target.fill(rgba, pygame.Rect(pos.x + dx, pos.y + dy, bounds.w, bounds.h))

    _paint(surface, color, bounds, painter)


def draw_rect(surface: pygame.Surface, pos: Vec2, size: Size2, color: Color) -> None:
    """Draw the one-pixel outline of a rectangle."""
    surface = _require_surface(surface)
    bounds = pygame.Rect(pos.x, pos.y, max(size.w, 0), max(size.h, 0))
    strips = rect_border_rects(pos, size)

    def painter(target, dx, dy, rgba):
        for x, y, w, h in strips:
            if w > 0 and h > 0:
                target.fill(rgba, pygame.Rect(x + dx, y + dy, w, h))

    _paint(surface, color, bounds, painter)


def _circle_bounds(pos: Vec2, radius: int) -> pygame.Rect:
    return pygame.Rect(pos.x - radius, pos.y - radius, 2 * radius + 1, 2 * radius + 1)


def draw_fill_circle(surface: pygame.Surface, pos: Vec2, radius: int, color: Color) -> None:
    """Fill a circle centred on *pos*."""
    surface = _require_surface(surface)
    lines = circle_span_lines(pos, radius)

    def painter(target, dx, dy, rgba):
        for (x1, y), (x2, _) in lines:
            target.fill(rgba, pygame.Rect(x1 + dx, y + dy, x2 - x1 + 1, 1))

    _paint(surface, color, _circle_bounds(pos, radius), painter)


def draw_circle(surface: pygame.Surface, pos: Vec2, radius: int, color: Color) -> None:
    """Draw the one-pixel outline of a circle centred on *pos*."""
    surface = _require_surface(surface)
    points = set(circle_outline_points(pos, radius))

    def painter(target, dx, dy, rgba):
        width, height = target.get_size()
        for x, y in points:
            px, py = x + dx, y + dy
            if 0 <= px < width and 0 <= py < height:
                target.set_at((px, py), rgba)

    _paint(surface, color, _circle_bounds(pos, radius), painter)