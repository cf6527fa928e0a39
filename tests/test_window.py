import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from heimdall_ui.component import ComponentKind
from heimdall_ui.rgb import rgb
from heimdall_ui.ui import UI
from heimdall_ui.utils import Size2, Vec2
from heimdall_ui.window import Window, initialize


@pytest.fixture
def window():
    initialize()
    win = Window("test", Size2(64, 48), rgb(255, 255, 255), rgb(10, 20, 30))
    yield win
    win.close()


def test_initialize_starts_subsystems():
    initialize()
    assert pygame.display.get_init()
    assert pygame.font.get_init()
    win = Window("init", Size2(8, 8), rgb(0, 0, 0), rgb(0, 0, 0))
    try:
        assert win.get_size() == Size2(8, 8)
    finally:
        win.close()
        pygame.font.quit()


def test_get_size(window):
    assert window.get_size() == Size2(64, 48)


def test_initial_state(window):
    assert window.should_close is False
    assert window.frames == 0
    assert window.fps == 0
    assert window.ui is None


def test_clear_fills_background(window):
    window.surface.fill((0, 0, 0))
    window.clear()
    assert tuple(window.surface.get_at((10, 10)))[:3] == (10, 20, 30)


def test_tick_fps_counts_frames_per_second(window):
    window.last_tick = 0.0
    window.tick_fps(0.5)
    assert window.frames == 1
    assert window.fps == 0
    window.tick_fps(1.5)
    assert window.fps == 2
    assert window.frames == 0
    assert window.last_tick == 1.5


def test_event_loop_stops_on_quit(window):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    window.event_loop()
    assert window.should_close is True


def test_loop_renders_until_closed(window):
    calls = []

    def render(win):
        calls.append(win)
        win.should_close = True

    ui = UI(window, None)
    box = ui.create_component(ComponentKind.BOX, Size2(4, 4), Vec2(0, 0))
    box.filled = True
    box.background = rgb(250, 0, 0)
    ui.add_component(box)

    window.render_func = render
    pygame.event.clear()
    window.loop()
    assert calls == [window]
    assert tuple(window.surface.get_at((1, 1)))[:3] == (250, 0, 0)
    assert tuple(window.surface.get_at((40, 40)))[:3] == (10, 20, 30)


def test_close_shuts_down_display():
    initialize()
    win = Window("closing", Size2(16, 16), rgb(0, 0, 0), rgb(0, 0, 0))
    assert win.get_size() == Size2(16, 16)
    win.close()
    assert not pygame.display.get_init()


def test_context_manager_closes():
    initialize()
    with Window("ctx", Size2(16, 16), rgb(0, 0, 0), rgb(0, 0, 0)) as win:
        assert win.get_size() == Size2(16, 16)
    assert not pygame.display.get_init()