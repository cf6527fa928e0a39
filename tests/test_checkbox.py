import pygame
import pytest

from heimdall_ui.checkbox import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, Checkbox, lerp
from heimdall_ui.component import ComponentKind
from heimdall_ui.events import Event, EventType
from heimdall_ui.rgb import rgb
from heimdall_ui.utils import Size2, Vec2


class _Window:
    def __init__(self):
        self.surface = pygame.Surface((120, 80))


def _checkbox():
    return Checkbox(pos=Vec2(30, 30), size=Size2(10, 10))


def _click(x, y):
    return Event(EventType.MOUSE_BUTTON_DOWN, x=x, y=y)


def test_kind():
    assert _checkbox().kind is ComponentKind.CHECKBOX


def test_lerp_midpoint():
    assert lerp(Vec2(0, 0), Vec2(100, 200), 50) == Vec2(50, 100)


@pytest.mark.parametrize("start, end", [(Vec2(3, 4), Vec2(17, -9)), (Vec2(-5, 8), Vec2(40, 40))])
def test_lerp_endpoints(start, end):
    assert lerp(start, end, 0) == start
    assert lerp(start, end, 100) == end


def test_init_sets_default_theme():
    box = Checkbox(background=rgb(1, 1, 1), foreground=rgb(2, 2, 2))
    box.init(None)
    assert box.background == DEFAULT_BACKGROUND
    assert box.foreground == DEFAULT_FOREGROUND


def test_click_toggles_and_starts_animation():
    box = _checkbox()
    box.handle_event(None, _click(30, 30))
    assert box.checked is True
    assert box.animating is True
    assert box.animation_curr.x < box.animation_end.x

    box.handle_event(None, _click(30, 30))
    assert box.checked is False
    assert box.animation_curr.x > box.animation_end.x


def test_click_outside_is_ignored():
    box = _checkbox()
    box.handle_event(None, _click(100, 70))
    assert box.checked is False
    assert box.animating is False


def test_motion_does_not_toggle():
    box = _checkbox()
    box.handle_event(None, Event(EventType.MOUSE_MOTION, x=30, y=30))
    assert box.checked is False


def test_animation_moves_one_pixel_per_frame():
    window = _Window()
    box = _checkbox()
    box.init(window)
    box.handle_event(window, _click(30, 30))
    start, end = box.animation_curr, box.animation_end

    frames = 0
    while box.animating and frames < 1000:
        box.render(window)
        frames += 1

    assert box.animating is False
    assert box.animation_curr == end
    assert frames == abs(end.x - start.x)


def test_knob_position_follows_state():
    box = _checkbox()
    box.init(None)
    off_spot = (box.pos.x + 2, box.pos.y)
    on_spot = (box.pos.x + 2 * box.size.w - 2, box.pos.y)

    window = _Window()
    box.render(window)
    assert window.surface.get_at(off_spot) == DEFAULT_FOREGROUND.as_tuple()
    assert window.surface.get_at(on_spot) == DEFAULT_BACKGROUND.as_tuple()

    box.checked = True
    window = _Window()
    box.render(window)
    assert window.surface.get_at(on_spot) == DEFAULT_FOREGROUND.as_tuple()
    assert window.surface.get_at(off_spot) == DEFAULT_BACKGROUND.as_tuple()