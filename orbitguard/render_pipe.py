"""Window, drawing surface and fonts shared by everything that draws."""

from __future__ import annotations

import os
from collections.abc import Sequence

import pygame

from .constants import (
    FILE_PATH_FONT,
    FONT_SIZES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)


class RenderPipeError(RuntimeError):
    """Raised when the display or the fonts cannot be set up."""


class RenderPipe:
    """Owns the display surface and the game's fonts.

    ``font_path`` of ``None`` selects pygame's built-in font.
    """

    def __init__(
        self,
        font_path: str | os.PathLike[str] | None = FILE_PATH_FONT,
        font_sizes: Sequence[int] = FONT_SIZES,
        size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
        fullscreen: bool = True,
    ) -> None:
        self.font_path = font_path
        self.font_sizes = tuple(font_sizes)
        self.size = size
        self.fullscreen = fullscreen
        self.surface: pygame.Surface | None = None
        self.fonts: list[pygame.font.Font] = []

    def open(self) -> None:
        """Create the window and load the fonts."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RenderPipeError(f"display could not init: {exc}") from exc
        flags = pygame.FULLSCREEN if self.fullscreen else 0
        try:
            self.surface = pygame.display.set_mode(self.size, flags)
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            self.close()
            raise RenderPipeError(f"window could not be created: {exc}") from exc
        self.surface.fill((0xFF, 0xFF, 0xFF))
        try:
            pygame.font.init()
            path = None if self.font_path is None else os.fspath(self.font_path)
            self.fonts = [pygame.font.Font(path, size) for size in self.font_sizes]
        except (pygame.error, OSError) as exc:
            self.close()
            raise RenderPipeError(f"failed to load font: {exc}") from exc

    def close(self) -> None:
        """Release the fonts and the window."""
        self.fonts = []
        self.surface = None
        if pygame.font.get_init():
            pygame.font.quit()
        if pygame.display.get_init():
            pygame.display.quit()

    def font(self, ind: int = 0) -> pygame.font.Font | None:
        """The font at ``ind``, or ``None`` when there is none."""
        if 0 <= ind < len(self.fonts):
            return self.fonts[ind]
        return None

    def clear(self, color: tuple[int, ...] = (0xFF, 0xFF, 0xFF, 0xFF)) -> None:
        """Fill the whole drawing surface with ``color``."""
        if self.surface is not None:
            self.surface.fill(color)

    def present(self) -> None:
        """Show what has been drawn."""
        if self.surface is not None:
            pygame.display.flip()

    def __enter__(self) -> RenderPipe:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()