from dataclasses import dataclass, field

import pygame
import pytest

from heimdall_ui.fonts import (
    MIN_FONT_SIZE,
    FontError,
    FontManager,
    active_manager,
    measure_text,
    render_text,
)
from heimdall_ui.rgb import rgb
from heimdall_ui.utils import Size2, Vec2


@dataclass
class _FakeWindow:
    fonts: FontManager
    surface: pygame.Surface = field(default_factory=lambda: pygame.Surface((200, 100)))

    def get_size(self) -> Size2:
        w, h = self.surface.get_size()
        return Size2(w, h)


@pytest.fixture
def manager():
    fm = FontManager(None, 24)
    yield fm
    fm.close()


@pytest.fixture
def window(manager):
    return _FakeWindow(fonts=manager)


def test_manager_records_name_and_max_size(manager):
    assert manager.font_name is None
    assert manager.max_size == 24


def test_larger_sizes_are_taller(manager):
    assert manager.get_font(20).get_height() > manager.get_font(MIN_FONT_SIZE).get_height()


def test_size_above_max_raises(manager):
    with pytest.raises(FontError):
        manager.get_font(25)


def test_size_below_min_raises(manager):
    with pytest.raises(FontError):
        manager.get_font(MIN_FONT_SIZE - 1)


def test_closed_manager_raises(manager):
    manager.close()
    with pytest.raises(FontError):
        manager.get_font(10)


def test_missing_font_file_raises():
    with pytest.raises(FontError):
        FontManager("/nonexistent/dir/missing-font.ttf", 8)


def test_latest_manager_is_active():
    fm = FontManager(None, 10)
    assert active_manager() is fm
    fm.close()


def test_empty_text_has_no_size(window):
    assert measure_text(window, 16, "") == Size2(0, 0)


def test_longer_text_is_wider(window):
    short = measure_text(window, 16, "ab")
    long = measure_text(window, 16, "abcdef")
    assert long.w > short.w
    assert long.h == short.h


def test_format_arguments_are_applied(window):
    assert measure_text(window, 16, "%d items", 3) == measure_text(window, 16, "3 items")


def test_long_text_wraps_to_window_width(window):
    single = measure_text(window, 16, "word")
    wrapped = measure_text(window, 16, " ".join(["word"] * 40))
    assert wrapped.h > single.h
    assert wrapped.w <= window.get_size().w - 10


def test_newline_adds_a_line(window):
    one = measure_text(window, 16, "line")
    two = measure_text(window, 16, "line\nline")
    assert two.h > one.h
    assert two.w == one.w


def test_render_matches_measure_and_draws(window):
    size = render_text(window, 16, rgb(255, 255, 255), Vec2(5, 5), "Hello")
    assert size == measure_text(window, 16, "Hello")
    region = window.surface.subsurface(pygame.Rect(5, 5, size.w, size.h))
    lit = [
        region.get_at((x, y))
        for x in range(size.w)
        for y in range(size.h)
        if region.get_at((x, y))[:3] != (0, 0, 0)
    ]
    assert lit


def test_render_leaves_outside_untouched(window):
    size = render_text(window, 16, rgb(255, 255, 255), Vec2(0, 0), "Hi")
    assert window.surface.get_at((size.w + 20, size.h + 20))[:3] == (0, 0, 0)