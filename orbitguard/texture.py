"""Images and rendered text that can be drawn rotated onto the screen."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pygame

from .util import Flip, RotationData

CUT_COLOR = (0xFF, 0xFF, 0xFF)
LONG_TEXT_WRAP = 600


class TextureError(RuntimeError):
    """Raised when a texture cannot be loaded or drawn."""


def _wrap_lines(font: pygame.font.Font, text: str, width: int) -> Iterator[str]:
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if line and font.size(candidate)[0] > width:
                yield line
                line = word
            else:
                line = candidate
        yield line


class Texture:
    """A drawable image with its size."""

    def __init__(self) -> None:
        self.surface: pygame.Surface | None = None
        self.width = 0
        self.height = 0
        self._color_mod = (0xFF, 0xFF, 0xFF)
        self._blend = 0

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> Texture:
        """Wrap an existing surface."""
        texture = cls()
        texture._assign(surface)
        return texture

    def _assign(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._color_mod = (0xFF, 0xFF, 0xFF)
        self._blend = 0

    def load_from_file(self, rp, path, color=CUT_COLOR) -> None:
        """Load an image; pixels of ``color`` become transparent."""
        self.free()
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"unable to load image {path}: {exc}") from exc
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        surface.set_colorkey(tuple(color[:3]))
        self._assign(surface)

    def _font(self, rp, ind: int) -> pygame.font.Font:
        font = rp.font(ind)
        if font is None:
            raise TextureError(f"no font loaded at index {ind}")
        return font

    def load_from_rendered_text(self, rp, text, color, ind=0) -> None:
        """Render one line of text without smoothing."""
        self.free()
        font = self._font(rp, ind)
        try:
            surface = font.render(text, False, color)
        except pygame.error as exc:
            raise TextureError(f"unable to render text surface: {exc}") from exc
        self._assign(surface)

    def load_from_rendered_long_text(self, rp, text, color, ind=0) -> None:
        """Render smoothed text wrapped at a fixed width, keeping line breaks."""
        self.free()
        font = self._font(rp, ind)
        lines = list(_wrap_lines(font, text, LONG_TEXT_WRAP))
        line_height = font.get_linesize()
        try:
            rendered = [font.render(line, True, color) if line else None for line in lines]
        except pygame.error as exc:
            raise TextureError(f"unable to render long text surface: {exc}") from exc
        width = max((r.get_width() for r in rendered if r is not None), default=0)
        surface = pygame.Surface((width, line_height * len(lines)), pygame.SRCALPHA)
        for row, line_surface in enumerate(rendered):
            if line_surface is not None:
                surface.blit(line_surface, (0, row * line_height))
        self._assign(surface)

    def free(self) -> None:
        if self.surface is not None:
            self.surface = None
            self.width = self.height = 0

    def set_color(self, red, green, blue) -> None:
        """Multiply the drawn colours by the given channel values."""
        self._color_mod = (red, green, blue)

    def set_blend_mode(self, blending) -> None:
        """Use a pygame blend flag when drawing."""
        self._blend = blending

    def set_alpha(self, alpha) -> None:
        if self.surface is not None:
            self.surface.set_alpha(alpha)

    def render(self, rp, x, y, clip=None, rd=None) -> None:
        """Draw at (x, y), optionally a clipped part, rotated about ``rd.center``."""
        if self.surface is None:
            return
        rd = rd if rd is not None else RotationData()
        image = self.surface if clip is None else self.surface.subsurface(clip)
        if self._color_mod != (0xFF, 0xFF, 0xFF):
            image = image.copy()
            image.fill(self._color_mod, special_flags=pygame.BLEND_RGB_MULT)
        if rd.flip:
            image = pygame.transform.flip(
                image, bool(rd.flip & Flip.HORIZONTAL), bool(rd.flip & Flip.VERTICAL)
            )
        target = rp.surface
        if rd.angle % 360 == 0:
            target.blit(image, (x, y), special_flags=self._blend)
            return
        width, height = image.get_size()
        pivot = pygame.math.Vector2(x + rd.center.x, y + rd.center.y)
        offset = pygame.math.Vector2(
            width / 2 - rd.center.x, height / 2 - rd.center.y
        ).rotate(rd.angle)
        rotated = pygame.transform.rotate(image, -rd.angle)
        new_center = pivot + offset
        rect = rotated.get_rect(center=(round(new_center.x), round(new_center.y)))
        target.blit(rotated, rect, special_flags=self._blend)