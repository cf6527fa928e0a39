"""Font management and text rendering.

A :class:`FontManager` opens one font face at every point size from
``MIN_FONT_SIZE`` up to (but not including) its ``max_size``. The text
functions look the manager up on the window (its ``fonts`` attribute),
falling back to the most recently created manager.
"""

from __future__ import annotations

import logging
import os
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .rgb import Color  # noqa: E402
from .utils import Size2, Vec2  # noqa: E402

__all__ = [
    "FontError",
    "FontManager",
    "measure_text",
    "render_text",
    "active_manager",
    "MIN_FONT_SIZE",
    "WRAP_MARGIN",
]

log = logging.getLogger(__name__)

MIN_FONT_SIZE = 3
WRAP_MARGIN = 10

_active: FontManager | None = None


class FontError(Exception):
    """Raised when a font cannot be opened or a size is not available."""


class FontManager:
    """Holds one opened font per point size for a single font face."""

    def __init__(self, default_font: str | None, max_size: int) -> None:
        global _active
        if not pygame.font.get_init():
            pygame.font.init()

        self.font_name = default_font
        self.max_size = max_size
        self._fonts: dict[int, pygame.font.Font] = {}
        self._closed = False

        for size in range(MIN_FONT_SIZE, max_size):
            try:
                self._fonts[size] = pygame.font.Font(default_font, size)
            except (OSError, pygame.error) as exc:
                raise FontError(
                    f'couldn\'t open font at "{default_font}" with size of {size}'
                ) from exc

        log.debug("successfully loaded all fonts")
        _active = self

    def get_font(self, size: int) -> pygame.font.Font:
        """Return the font opened at *size* points."""
        if self._closed:
            raise FontError("font manager has been closed")
        if size > self.max_size or size not in self._fonts:
            raise FontError(f"couldn't find font with size: {size}")
        return self._fonts[size]

    def close(self) -> None:
        """Release every opened font."""
        self._fonts.clear()
        self._closed = True
        log.debug("closed all fonts that was in use")

    def __enter__(self) -> FontManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def active_manager() -> FontManager | None:
    """Return the most recently created font manager, if any."""
    return _active


def _manager_for(window: Any) -> FontManager:
    manager = getattr(window, "fonts", None) or _active
    if manager is None:
        raise FontError("no font manager has been initialised")
    return manager


def _format(text: str, args: tuple[Any, ...]) -> str:
    return text % args if args else text


def _wrap_lines(font: pygame.font.Font, text: str, width: int) -> list[str]:
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if width <= 0:
            lines.append(paragraph)
            continue
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and font.size(candidate)[0] > width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def _layout(window: Any, size: int, text: str) -> tuple[pygame.font.Font, list[str], Size2]:
    font = _manager_for(window).get_font(size)
    if not text:
        return font, [], Size2(0, 0)
    wrap_width = window.get_size().w - WRAP_MARGIN
    lines = _wrap_lines(font, text, wrap_width)
    width = max(font.size(line)[0] for line in lines)
    height = font.get_linesize() * (len(lines) - 1) + font.get_height()
    return font, lines, Size2(width, height)


def measure_text(window: Any, size: int, text: str, *args: Any) -> Size2:
    """Return the size *text* would take when rendered at *size* points.

    Text wraps at the window width less a small margin. Extra *args* are
    %-formatted into *text*.
    """
    _, _, extent = _layout(window, size, _format(text, args))
    return extent


def render_text(
    window: Any, size: int, color: Color, pos: Vec2, text: str, *args: Any
) -> Size2:
    """Draw *text* onto the window's surface at *pos* and return its size."""
    font, lines, extent = _layout(window, size, _format(text, args))
    line_height = font.get_linesize()
    for index, line in enumerate(lines):
        if not line:
            continue
        rendered = font.render(line, True, color.as_tuple()[:3])
        window.surface.blit(rendered, (pos.x, pos.y + index * line_height))
    return extent