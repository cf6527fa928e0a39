"""A single-line text entry field."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .component import Callback, Component, ComponentKind, EventKind, set_system_cursor  # noqa: E402
from .drawing import draw_fill_rect, draw_rect  # noqa: E402
from .events import BACKSPACE_SCANCODE, Event, EventType  # noqa: E402
from .fonts import measure_text, render_text  # noqa: E402
from .rgb import Color, rgba  # noqa: E402
from .utils import Size2, Vec2, check_collision_box  # noqa: E402

__all__ = [
    "TextInput",
    "TEXT_SIZE",
    "TEXT_INDENT",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "DEFAULT_BORDER",
    "HOVER_BACKGROUND",
]

log = logging.getLogger(__name__)

TEXT_SIZE = 16
TEXT_INDENT = 8
DEFAULT_BACKGROUND = rgba(40, 40, 40, 255)
DEFAULT_FOREGROUND = rgba(255, 255, 255, 255)
DEFAULT_BORDER = rgba(140, 149, 184, 255)
HOVER_BACKGROUND = rgba(30, 30, 30, 255)


def _set_text_input(enabled: bool) -> None:
    try:
        if enabled:
            pygame.key.start_text_input()
        else:
            pygame.key.stop_text_input()
    except pygame.error as exc:
        log.debug("couldn't toggle text input: %s", exc)


@dataclass(eq=False)
class TextInput(Component):
    """An editable text field that takes keyboard input after a click."""

    kind: ClassVar[ComponentKind] = ComponentKind.INPUT

    value: str = ""
    background: Color = DEFAULT_BACKGROUND
    foreground: Color = DEFAULT_FOREGROUND
    border: Color = DEFAULT_BORDER
    default_colors: bool = False
    typing: bool = False
    callback: Optional[Callback] = None

    def init(self, window: Any) -> None:
        """Reset the colours to the default theme."""
        self.background = DEFAULT_BACKGROUND
        self.foreground = DEFAULT_FOREGROUND
        self.border = DEFAULT_BORDER

    def render(self, window: Any) -> None:
        """Draw the field, its text and, while typing, the caret."""
        draw_fill_rect(window.surface, self.pos, self.size, self.background)
        draw_rect(window.surface, self.pos, self.size, self.border)

        extent = measure_text(window, TEXT_SIZE, self.value)
        text_pos = Vec2(
            self.pos.x + TEXT_INDENT,
            self.pos.y + (self.size.h // 2 - extent.h // 2),
        )
        render_text(window, TEXT_SIZE, self.foreground, text_pos, self.value)

        if self.typing and self.value:
            draw_fill_rect(
                window.surface,
                Vec2(extent.w + text_pos.x + 2, text_pos.y + 2),
                Size2(1, extent.h - 4),
                self.foreground,
            )

    def _call(self, kind: EventKind) -> None:
        if self.callback is not None:
            self.callback(self, kind)

    def handle_event(self, window: Any, event: Event) -> None:
        """Handle focus, hovering, typed text and backspace."""
        hit = check_collision_box(
            self.pos.x, self.pos.y, self.size.w, self.size.h, event.x, event.y, 2, 2
        )

        if event.type is EventType.MOUSE_BUTTON_DOWN:
            if hit:
                log.debug("clicked input, id=%d", self.id)
                _set_text_input(True)
                self.typing = True
                self.last_event = EventKind.CLICK
                self._call(EventKind.CLICK)
            else:
                _set_text_input(False)
                self.typing = False
        elif event.type is EventType.MOUSE_MOTION:
            if hit:
                set_system_cursor(pygame.SYSTEM_CURSOR_IBEAM)
                if self.default_colors:
                    self.background = HOVER_BACKGROUND
                self.last_event = EventKind.HOVER
                self._call(EventKind.HOVER)
            elif self.last_event is EventKind.HOVER:
                set_system_cursor(pygame.SYSTEM_CURSOR_ARROW)
                if self.default_colors:
                    self.background = HOVER_BACKGROUND
                self.last_event = EventKind.OUT_HOVER
                self._call(EventKind.OUT_HOVER)
        elif event.type is EventType.KEY_DOWN and event.scancode == BACKSPACE_SCANCODE:
            if self.value:
                self.value = self.value[:-1]
                self._call(EventKind.CHANGE)
                self.last_event = EventKind.CHANGE
        elif event.type is EventType.TEXT_INPUT:
            self.value += event.text
            self._call(EventKind.CHANGE)
            self.last_event = EventKind.CHANGE