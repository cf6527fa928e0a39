"""The application window and its main loop."""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .events import EventType, handle_window_input  # noqa: E402
from .rgb import Color  # noqa: E402
from .utils import Size2  # noqa: E402

__all__ = ["Window", "initialize", "RENDER_EVERY", "FPS_INTERVAL"]

log = logging.getLogger(__name__)

RENDER_EVERY = 5
FPS_INTERVAL = 1.0


def initialize() -> None:
    """Start the display and font subsystems."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RuntimeError("failed to initialize the display") from exc
    try:
        pygame.font.init()
    except pygame.error as exc:
        raise RuntimeError("failed to initialize fonts") from exc
    log.debug("successfully initialized all display libraries")


class Window:
    """A window with a background colour, an optional UI and a render loop."""

    def __init__(self, title: str, size: Size2, fg: Color, bg: Color) -> None:
        if not pygame.display.get_init():
            initialize()
        self.title = title
        self.surface = pygame.display.set_mode((size.w, size.h))
        pygame.display.set_caption(title)

        self.should_close = False
        self.render_func: Optional[Callable[[Window], None]] = None
        self.input_func: Optional[Callable[[Window], None]] = None
        self.ui: Any = None
        self.fonts: Any = None

        self.frames = 0
        self.fps = 0
        self.last_tick = time.perf_counter()

        self.fg = fg
        self.bg = bg
        log.debug('successfully created window with title "%s"', title)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def clear(self) -> None:
        """Fill the window with its background colour."""
        self.surface.fill(self.bg.as_tuple())

    def swap_buffer(self) -> None:
        """Show what has been drawn since the last swap."""
        pygame.display.flip()

    def tick_fps(self, now: Optional[float] = None) -> None:
        """Count a frame; once a second has passed since the last update, set ``fps``."""
        if now is None:
            now = time.perf_counter()
        self.frames += 1
        if now > self.last_tick + FPS_INTERVAL:
            self.fps = self.frames
            self.frames = 0
            self.last_tick = now
            log.debug("fps: %d", self.fps)

    def get_size(self) -> Size2:
        """Return the window size in pixels."""
        width, height = self.surface.get_size()
        return Size2(width, height)

    def event_loop(self) -> None:
        """Handle input events until the window is asked to close."""
        while not self.should_close:
            handle_window_input(self)

    def _pump_events(self) -> None:
        while not self.should_close:
            if handle_window_input(self).type is EventType.NONE:
                break

    def loop(self) -> None:
        """Initialise the UI, then draw and handle input until the window closes."""
        if self.ui is not None:
            self.ui.init()

        while not self.should_close:
            self._pump_events()
            if self.should_close:
                break
            if self.frames % RENDER_EVERY == 0:
                self.clear()
                if self.render_func is not None:
                    self.render_func(self)
                if self.ui is not None:
                    self.ui.render()
                self.swap_buffer()
            self.tick_fps()

    def close(self) -> None:
        """Shut down the display and font subsystems."""
        if self.fonts is not None:
            self.fonts.close()
        pygame.font.quit()
        pygame.display.quit()
        log.debug("closed all display libraries")