"""A clickable push button with a centred label."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .component import Callback, Component, ComponentKind, EventKind, set_system_cursor  # noqa: E402
from .drawing import draw_fill_rect, draw_rect  # noqa: E402
from .events import Event, EventType  # noqa: E402
from .fonts import measure_text, render_text  # noqa: E402
from .rgb import Color, rgba  # noqa: E402
from .utils import Vec2, check_collision_box  # noqa: E402

__all__ = [
    "Button",
    "LABEL_SIZE",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "DEFAULT_BORDER",
    "HOVER_BACKGROUND",
]

log = logging.getLogger(__name__)

LABEL_SIZE = 16
DEFAULT_BACKGROUND = rgba(40, 40, 40, 255)
DEFAULT_FOREGROUND = rgba(255, 255, 255, 255)
DEFAULT_BORDER = rgba(140, 149, 184, 255)
HOVER_BACKGROUND = rgba(30, 30, 30, 255)


@dataclass(eq=False)
class Button(Component):
    """A button that reports clicks and hovering to an optional callback."""

    kind: ClassVar[ComponentKind] = ComponentKind.BUTTON

    value: str = ""
    background: Color = DEFAULT_BACKGROUND
    foreground: Color = DEFAULT_FOREGROUND
    border: Color = DEFAULT_BORDER
    default_colors: bool = False
    callback: Optional[Callback] = None

    def init(self, window: Any) -> None:
        """Reset the colours to the default theme."""
        self.background = DEFAULT_BACKGROUND
        self.foreground = DEFAULT_FOREGROUND
        self.border = DEFAULT_BORDER

    def render(self, window: Any) -> None:
        """Draw the button body, its border and the centred label."""
        draw_fill_rect(window.surface, self.pos, self.size, self.background)
        draw_rect(window.surface, self.pos, self.size, self.border)

        label = measure_text(window, LABEL_SIZE, self.value)
        label_pos = Vec2(
            self.pos.x + (self.size.w // 2 - label.w // 2),
            self.pos.y + (self.size.h // 2 - label.h // 2),
        )
        render_text(window, LABEL_SIZE, self.foreground, label_pos, self.value)

    def _notify(self, kind: EventKind) -> None:
        self.last_event = kind
        if self.callback is not None:
            self.callback(self, kind)

    def handle_event(self, window: Any, event: Event) -> None:
        """Track clicks and hovering over the button."""
        hit = check_collision_box(
            self.pos.x, self.pos.y, self.size.w, self.size.h, event.x, event.y, 2, 2
        )

        if event.type is EventType.MOUSE_BUTTON_DOWN:
            if hit:
                log.debug("clicked button, id=%d", self.id)
                self._notify(EventKind.CLICK)
        elif event.type is EventType.MOUSE_MOTION:
            if hit:
                set_system_cursor(pygame.SYSTEM_CURSOR_HAND)
                if self.default_colors:
                    self.background = HOVER_BACKGROUND
                self._notify(EventKind.HOVER)
            elif self.last_event is EventKind.HOVER:
                set_system_cursor(pygame.SYSTEM_CURSOR_ARROW)
                if self.default_colors:
                    self.background = DEFAULT_BACKGROUND
                self._notify(EventKind.OUT_HOVER)