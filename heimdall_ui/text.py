"""A static text label."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .component import Component, ComponentKind
from .fonts import render_text
from .rgb import Color, rgb

__all__ = ["Text"]


@dataclass(eq=False)
class Text(Component):
    """A label drawn at ``pos`` with the window's font manager."""

    kind: ClassVar[ComponentKind] = ComponentKind.TEXT

    value: str = ""
    font_size: int = 16
    color: Color = rgb(255, 255, 255)

    def render(self, window: Any) -> None:
        """Draw the label onto the window."""
        render_text(window, self.font_size, self.color, self.pos, self.value)