import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from heimdall_ui.box import Box
from heimdall_ui.button import Button, DEFAULT_BACKGROUND
from heimdall_ui.checkbox import Checkbox
from heimdall_ui.component import ComponentKind, EventKind
from heimdall_ui.events import Event, EventType
from heimdall_ui.image import Image
from heimdall_ui.rgb import rgb
from heimdall_ui.slider import Slider
from heimdall_ui.text import Text
from heimdall_ui.textinput import TextInput
from heimdall_ui.ui import FIRST_COMPONENT_ID, UI
from heimdall_ui.utils import Size2, Vec2


class FakeWindow:
    def __init__(self):
        self.surface = pygame.Surface((100, 100))
        self.ui = None


@pytest.fixture
def ui():
    return UI(FakeWindow(), None)


def test_ui_attaches_to_window():
    window = FakeWindow()
    ui = UI(window, "content")
    assert window.ui is ui
    assert ui.web_content == "content"
    assert len(ui) == 0


@pytest.mark.parametrize(
    "kind, cls",
    [
        (ComponentKind.BUTTON, Button),
        (ComponentKind.INPUT, TextInput),
        (ComponentKind.IMAGE, Image),
        (ComponentKind.TEXT, Text),
        (ComponentKind.SLIDER, Slider),
        (ComponentKind.CHECKBOX, Checkbox),
        (ComponentKind.BOX, Box),
    ],
)
def test_create_component_picks_class(ui, kind, cls):
    component = ui.create_component(kind, Size2(10, 20), Vec2(1, 2), True)
    assert type(component) is cls
    assert component.size == Size2(10, 20)
    assert component.pos == Vec2(1, 2)
    assert component.web_content is True
    assert component.ui_parent is ui


def test_ids_follow_number_of_added_components(ui):
    first = ui.create_component(ComponentKind.BOX, Size2(1, 1), Vec2(0, 0))
    assert first.id == FIRST_COMPONENT_ID
    ui.add_component(first)
    second = ui.create_component(ComponentKind.BOX, Size2(1, 1), Vec2(0, 0))
    assert second.id == FIRST_COMPONENT_ID + 1


def test_create_component_does_not_add(ui):
    ui.create_component(ComponentKind.BOX, Size2(1, 1), Vec2(0, 0))
    assert list(ui) == []


def test_unknown_kind_raises(ui):
    with pytest.raises(ValueError):
        ui.create_component(99, Size2(1, 1), Vec2(0, 0))


def test_find_component(ui):
    a = ui.create_component(ComponentKind.BOX, Size2(1, 1), Vec2(0, 0))
    ui.add_component(a)
    b = ui.create_component(ComponentKind.BUTTON, Size2(1, 1), Vec2(0, 0))
    ui.add_component(b)
    assert ui.find_component(a.id) is a
    assert ui.find_component(b.id) is b
    assert ui.find_component(12345) is None


def test_init_resets_component_colours(ui):
    button = ui.create_component(ComponentKind.BUTTON, Size2(10, 10), Vec2(0, 0))
    button.background = rgb(1, 2, 3)
    ui.add_component(button)
    ui.init()
    assert button.background == DEFAULT_BACKGROUND


def test_render_draws_components(ui):
    box = ui.create_component(ComponentKind.BOX, Size2(10, 10), Vec2(5, 5))
    box.filled = True
    box.background = rgb(200, 10, 20)
    ui.add_component(box)
    ui.render()
    assert tuple(ui.window.surface.get_at((7, 7)))[:3] == (200, 10, 20)
    assert tuple(ui.window.surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_handle_event_dispatches_to_components(ui):
    seen = []
    button = ui.create_component(ComponentKind.BUTTON, Size2(20, 20), Vec2(0, 0))
    button.callback = lambda component, kind: seen.append((component, kind))
    ui.add_component(button)
    ui.handle_event(Event(EventType.MOUSE_BUTTON_DOWN, x=5, y=5))
    assert seen == [(button, EventKind.CLICK)]
    assert button.last_event is EventKind.CLICK