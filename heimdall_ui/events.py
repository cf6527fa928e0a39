"""Input events and the per-window input handler."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

__all__ = [
    "EventType",
    "Event",
    "from_pygame",
    "poll_event",
    "handle_window_input",
    "BACKSPACE_SCANCODE",
]

log = logging.getLogger(__name__)

BACKSPACE_SCANCODE = 42


class EventType(enum.Enum):
    """The kinds of input event the UI reacts to."""

    NONE = enum.auto()
    QUIT = enum.auto()
    MOUSE_BUTTON_DOWN = enum.auto()
    MOUSE_BUTTON_UP = enum.auto()
    MOUSE_MOTION = enum.auto()
    KEY_DOWN = enum.auto()
    TEXT_INPUT = enum.auto()
    OTHER = enum.auto()


@dataclass(frozen=True)
class Event:
    """A backend-independent input event."""

    type: EventType
    x: int = 0
    y: int = 0
    button: int = 0
    scancode: int = 0
    text: str = ""


_TYPE_MAP = {
    pygame.NOEVENT: EventType.NONE,
    pygame.QUIT: EventType.QUIT,
    pygame.MOUSEBUTTONDOWN: EventType.MOUSE_BUTTON_DOWN,
    pygame.MOUSEBUTTONUP: EventType.MOUSE_BUTTON_UP,
    pygame.MOUSEMOTION: EventType.MOUSE_MOTION,
    pygame.KEYDOWN: EventType.KEY_DOWN,
    pygame.TEXTINPUT: EventType.TEXT_INPUT,
}


def from_pygame(event: Any) -> Event:
    """Convert a pygame event into an :class:`Event`."""
    kind = _TYPE_MAP.get(event.type, EventType.OTHER)
    x, y = getattr(event, "pos", (0, 0))
    return Event(
        type=kind,
        x=int(x),
        y=int(y),
        button=int(getattr(event, "button", 0)),
        scancode=int(getattr(event, "scancode", 0)),
        text=str(getattr(event, "text", "")),
    )


def poll_event() -> Event:
    """Take the next pending event from the queue, or a NONE event."""
    return from_pygame(pygame.event.poll())


def handle_window_input(window: Any, event: Event | None = None) -> Event:
    """Process one input event for *window* and pass it on to its UI.

    When *event* is None the next pending event is polled. A quit event
    marks the window as closing.
    """
    if event is None:
        event = poll_event()

    if event.type is EventType.QUIT:
        log.debug("got quit event, exiting the window")
        window.should_close = True

    if event.type is EventType.MOUSE_BUTTON_DOWN:
        log.debug("clicked at %ux%u", event.x, event.y)

    ui = getattr(window, "ui", None)
    if ui is not None:
        ui.handle_event(event)
    return event