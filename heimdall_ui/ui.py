"""A collection of components that share one window."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from .box import Box
from .button import Button
from .checkbox import Checkbox
from .component import Component, ComponentKind
from .events import Event
from .image import Image
from .slider import Slider
from .text import Text
from .textinput import TextInput
from .utils import Size2, Vec2

__all__ = ["UI", "FIRST_COMPONENT_ID", "COMPONENT_CLASSES"]

log = logging.getLogger(__name__)

FIRST_COMPONENT_ID = 0xFF

COMPONENT_CLASSES: dict[ComponentKind, type[Component]] = {
    ComponentKind.BUTTON: Button,
    ComponentKind.IMAGE: Image,
    ComponentKind.INPUT: TextInput,
    ComponentKind.TEXT: Text,
    ComponentKind.SLIDER: Slider,
    ComponentKind.CHECKBOX: Checkbox,
    ComponentKind.BOX: Box,
}


class UI:
    """Owns the components of a window and dispatches init, render and events."""

    def __init__(self, window: Any, web_content: Any = None) -> None:
        self.window = window
        self.web_content = web_content
        self.components: list[Component] = []
        window.ui = self

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def create_component(
        self,
        kind: ComponentKind | int,
        size: Size2,
        pos: Vec2,
        web_content: bool = False,
    ) -> Component:
        """Build a component of *kind*; it is not added until :meth:`add_component`.

        Its id is the number of components already added plus 0xFF.
        """
        try:
            component_kind = ComponentKind(kind)
        except ValueError as exc:
            raise ValueError(f"unknown component kind: {kind!r}") from exc
        cls = COMPONENT_CLASSES[component_kind]
        return cls(
            size=size,
            pos=pos,
            web_content=web_content,
            id=len(self.components) + FIRST_COMPONENT_ID,
            layer=0,
            ui_parent=self,
        )

    def add_component(self, component: Component) -> None:
        """Append *component* to the UI."""
        self.components.append(component)

    def render(self) -> None:
        """Draw every component in the order they were added."""
        for component in self.components:
            component.render(self.window)

    def handle_event(self, event: Event) -> None:
        """Give *event* to every component."""
        for component in self.components:
            component.handle_event(self.window, event)

    def init(self) -> None:
        """Initialise every component."""
        for component in self.components:
            component.init(self.window)

    def find_component(self, component_id: int) -> Optional[Component]:
        """Return the first component with *component_id*, or None."""
        return next((c for c in self.components if c.id == component_id), None)