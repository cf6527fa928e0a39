"""A horizontal slider with a draggable round handle."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, ClassVar

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .component import Component, ComponentKind, set_system_cursor  # noqa: E402
from .drawing import draw_circle, draw_fill_circle, draw_fill_rect  # noqa: E402
from .events import Event, EventType  # noqa: E402
from .rgb import Color, rgba  # noqa: E402
from .utils import Size2, Vec2, check_collision_box  # noqa: E402

__all__ = [
    "Slider",
    "TRACK_HEIGHT",
    "HANDLE_RADIUS",
    "HANDLE_HIT_SIZE",
    "DEFAULT_HANDLER_COLOR",
    "DEFAULT_BACKGROUND",
    "DEFAULT_COLOR",
]

log = logging.getLogger(__name__)

TRACK_HEIGHT = 5
HANDLE_RADIUS = 7
HANDLE_HIT_SIZE = 15
DEFAULT_HANDLER_COLOR = rgba(140, 149, 184, 255)
DEFAULT_BACKGROUND = rgba(40, 40, 40, 255)
DEFAULT_COLOR = rgba(80, 80, 80, 255)


@dataclass(eq=False)
class Slider(Component):
    """A slider whose ``value`` runs from 0 to ``max_value`` across ``size.w``."""

    kind: ClassVar[ComponentKind] = ComponentKind.SLIDER

    value: float = 0.0
    max_value: float = 100.0
    handler_color: Color = DEFAULT_HANDLER_COLOR
    background: Color = DEFAULT_BACKGROUND
    color: Color = DEFAULT_COLOR
    dragged: bool = False

    def _handle_x(self) -> int:
        return int(self.pos.x + (self.size.w * self.value) / self.max_value)

    def _value_at(self, x: int) -> float:
        return (self.max_value * (x - self.pos.x)) / self.size.w

    def init(self, window: Any) -> None:
        """Reset the colours to the default theme."""
        self.handler_color = DEFAULT_HANDLER_COLOR
        self.background = DEFAULT_BACKGROUND
        self.color = DEFAULT_COLOR

    def render(self, window: Any) -> None:
        """Draw the track and the handle at the current value."""
        surface = window.surface
        draw_fill_rect(surface, self.pos, Size2(self.size.w, TRACK_HEIGHT), self.background)
        handle = Vec2(self._handle_x(), self.pos.y + 3)
        draw_fill_circle(surface, handle, HANDLE_RADIUS, self.handler_color)
        draw_circle(surface, handle, HANDLE_RADIUS, self.background)

    def handle_event(self, window: Any, event: Event) -> None:
        """Jump to clicks on the track and follow the handle while dragged."""
        handle = Vec2(self._handle_x(), self.pos.y - 5)
        on_handle = check_collision_box(
            handle.x, handle.y, HANDLE_HIT_SIZE, HANDLE_HIT_SIZE, event.x, event.y, 2, 2
        )
        on_track = check_collision_box(
            self.pos.x, self.pos.y, self.size.w, TRACK_HEIGHT, event.x, event.y, 2, 2
        )

        if event.type is EventType.MOUSE_BUTTON_DOWN:
            if on_handle:
                set_system_cursor(pygame.SYSTEM_CURSOR_HAND)
                self.dragged = True
            if on_track:
                self.value = self._value_at(event.x)
                log.debug("new value of slider, slider_value=%.6f", self.value)

        if event.type is EventType.MOUSE_BUTTON_UP:
            set_system_cursor(pygame.SYSTEM_CURSOR_ARROW)
            self.dragged = False

        if event.type is EventType.MOUSE_MOTION:
            if event.x - self.pos.x > self.size.w or event.x < self.pos.x:
                return
            if self.dragged:
                self.value = self._value_at(event.x)
                log.debug("new value of slider, slider_value=%.6f", self.value)