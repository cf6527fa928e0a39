"""A toggle switch with a sliding knob."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, ClassVar

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .component import Component, ComponentKind, set_system_cursor  # noqa: E402
from .drawing import draw_fill_circle, draw_fill_rect  # noqa: E402
from .events import Event, EventType  # noqa: E402
from .rgb import Color, rgba  # noqa: E402
from .utils import Size2, Vec2, check_collision_box  # noqa: E402

__all__ = ["Checkbox", "lerp", "DEFAULT_BACKGROUND", "DEFAULT_FOREGROUND"]

DEFAULT_BACKGROUND = rgba(40, 40, 40, 255)
DEFAULT_FOREGROUND = rgba(140, 149, 184, 255)


def lerp(start: Vec2, end: Vec2, velocity: float) -> Vec2:
    """Interpolate between *start* and *end*; *velocity* is a percentage."""
    return Vec2(
        int(start.x + (end.x - start.x) * velocity / 100.0),
        int(start.y + (end.y - start.y) * velocity / 100.0),
    )


@dataclass(eq=False)
class Checkbox(Component):
    """A pill-shaped switch; ``size.w`` is the radius of its rounded ends."""

    kind: ClassVar[ComponentKind] = ComponentKind.CHECKBOX

    checked: bool = False
    background: Color = DEFAULT_BACKGROUND
    foreground: Color = DEFAULT_FOREGROUND
    animating: bool = False
    animation_curr: Vec2 = field(default_factory=Vec2)
    animation_end: Vec2 = field(default_factory=Vec2)

    def _knob_position(self, checked: bool) -> Vec2:
        if checked:
            return Vec2(self.pos.x + 2 * self.size.w - 2, self.pos.y)
        return Vec2(self.pos.x + 2, self.pos.y)

    def init(self, window: Any) -> None:
        """Reset the colours to the default theme."""
        self.background = DEFAULT_BACKGROUND
        self.foreground = DEFAULT_FOREGROUND

    def render(self, window: Any) -> None:
        """Draw the track and the knob, advancing a running animation by a pixel."""
        surface = window.surface
        radius = self.size.w
        draw_fill_circle(surface, self.pos, radius, self.background)
        draw_fill_circle(surface, Vec2(self.pos.x + radius * 2, self.pos.y), radius, self.background)
        draw_fill_rect(
            surface,
            Vec2(self.pos.x, self.pos.y - radius),
            Size2(radius * 2, radius * 2 + 1),
            self.background,
        )

        if not self.animating:
            draw_fill_circle(surface, self._knob_position(self.checked), radius - 2, self.foreground)
            return

        curr, end = self.animation_curr, self.animation_end
        if curr.x > end.x:
            curr = Vec2(curr.x - 1, curr.y)
        elif curr.x < end.x:
            curr = Vec2(curr.x + 1, curr.y)
        self.animation_curr = curr

        draw_fill_circle(surface, curr, radius - 2, self.foreground)

        if curr.x == end.x:
            self.animating = False

    def handle_event(self, window: Any, event: Event) -> None:
        """Toggle on a click over the switch and start the knob animation."""
        radius = self.size.w
        hit = check_collision_box(
            self.pos.x - radius,
            self.pos.y - radius,
            radius * 4 + 1,
            radius * 2,
            event.x,
            event.y,
            2,
            2,
        )

        if hit and event.type is EventType.MOUSE_BUTTON_DOWN:
            self.checked = not self.checked
            self.animation_curr = self._knob_position(not self.checked)
            self.animation_end = self._knob_position(self.checked)
            self.animating = True

        if hit and event.type is EventType.MOUSE_MOTION:
            set_system_cursor(pygame.SYSTEM_CURSOR_HAND)