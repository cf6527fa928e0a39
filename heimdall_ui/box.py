"""A plain rectangle component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .component import Component, ComponentKind
from .drawing import draw_fill_rect, draw_rect
from .rgb import Color, rgb

__all__ = ["Box"]


@dataclass(eq=False)
class Box(Component):
    """A rectangle, either filled or drawn as a one-pixel outline."""

    kind: ClassVar[ComponentKind] = ComponentKind.BOX

    filled: bool = False
    background: Color = rgb(0, 0, 0)

    def render(self, window: Any) -> None:
        """Draw the box onto the window's surface."""
        draw = draw_fill_rect if self.filled else draw_rect
        draw(window.surface, self.pos, self.size, self.background)