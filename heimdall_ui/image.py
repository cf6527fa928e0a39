"""An image component loaded from a local file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .component import Component, ComponentKind  # noqa: E402
from .utils import Size2  # noqa: E402

__all__ = ["Image", "NATURAL_SIZE"]

log = logging.getLogger(__name__)

NATURAL_SIZE = -1


@dataclass(eq=False)
class Image(Component):
    """A picture; a width or height of -1 means the image's own size."""

    kind: ClassVar[ComponentKind] = ComponentKind.IMAGE

    size: Size2 = field(default_factory=lambda: Size2(NATURAL_SIZE, NATURAL_SIZE))
    path: Optional[str] = None
    url: Optional[str] = None
    image: Optional[pygame.Surface] = None
    image_size: Size2 = field(default_factory=Size2)

    def init(self, window: Any) -> None:
        """Load the image from ``path``; remote images are not supported."""
        if self.path is None:
            log.error("fetching images from internet is not supported yet")

        if self.url is not None:
            return

        try:
            loaded = pygame.image.load(self.path)
        except (pygame.error, OSError, TypeError, FileNotFoundError):
            log.error('couldn\'t load image resource "%s"', self.path)
            return

        self.image = loaded
        self.image_size = Size2(*loaded.get_size())

    def _draw_size(self) -> tuple[int, int]:
        width = self.image_size.w if self.size.w == NATURAL_SIZE else self.size.w
        height = self.image_size.h if self.size.h == NATURAL_SIZE else self.size.h
        return width, height

    def render(self, window: Any) -> None:
        """Draw the image at ``pos``, scaled to ``size`` when one is given."""
        if self.image is None:
            return
        width, height = self._draw_size()
        picture = self.image
        if (width, height) != picture.get_size():
            picture = pygame.transform.scale(picture, (max(width, 0), max(height, 0)))
        window.surface.blit(picture, (self.pos.x, self.pos.y))