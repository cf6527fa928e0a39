"""The base class shared by every UI component, and its enumerations."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .events import Event  # noqa: E402
from .utils import Size2, Vec2  # noqa: E402

__all__ = [
    "EventKind",
    "ComponentKind",
    "Component",
    "Callback",
    "component_kind_name",
    "set_system_cursor",
    "UNKNOWN_COMPONENT",
]

log = logging.getLogger(__name__)

UNKNOWN_COMPONENT = "UNKNOWN_COMPONENT"


class EventKind(enum.Enum):
    """What last happened to a component."""

    NONE = enum.auto()
    CLICK = enum.auto()
    HOVER = enum.auto()
    OUT_HOVER = enum.auto()
    CHANGE = enum.auto()


class ComponentKind(enum.IntEnum):
    """The kinds of component a UI can hold."""

    BUTTON = 0x00
    INPUT = 0x01
    IMAGE = 0x02
    TEXT = 0x03
    SLIDER = 0x04
    CHECKBOX = 0x05
    BOX = 0x06


_KIND_NAMES = {
    ComponentKind.BUTTON: "BUTTON_COMPONENT",
    ComponentKind.INPUT: "INPUT_COMPONENT",
    ComponentKind.IMAGE: "IMAGE_COMPONENT",
    ComponentKind.TEXT: "TEXT_COMPONENT",
}


def component_kind_name(kind: ComponentKind | int) -> str:
    """Return the display name of *kind*, or ``UNKNOWN_COMPONENT``."""
    try:
        name = _KIND_NAMES.get(ComponentKind(kind))
    except ValueError:
        name = None
    if name is None:
        log.error("unknown component kind")
        return UNKNOWN_COMPONENT
    return name


def set_system_cursor(cursor: int) -> None:
    """Switch the mouse cursor, ignoring the request when there is no display."""
    try:
        pygame.mouse.set_cursor(cursor)
    except pygame.error as exc:
        log.debug("couldn't change the cursor: %s", exc)


Callback = Callable[["Component", EventKind], None]


@dataclass(eq=False)
class Component:
    """A rectangle on screen that can be initialised, drawn and given events.

    Subclasses override :meth:`init`, :meth:`render` and :meth:`handle_event`;
    the base implementations do nothing.
    """

    kind: ClassVar[Optional[ComponentKind]] = None

    size: Size2 = field(default_factory=Size2)
    pos: Vec2 = field(default_factory=Vec2)
    web_content: bool = False
    id: int = 0
    layer: int = 0
    ui_parent: Any = None
    last_event: EventKind = EventKind.NONE

    def init(self, window: Any) -> None:
        """Prepare the component before the first frame."""

    def render(self, window: Any) -> None:
        """Draw the component onto the window."""

    def handle_event(self, window: Any, event: Event) -> None:
        """React to one input event."""