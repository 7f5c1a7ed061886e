"""The column of level preview pictures on the level menu."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import FILE_PATHS_LEVEL_IMAGES
from .texture import Texture

_CUT_COLOR = (0xFF, 0x00, 0x00, 0xFF)
_IMAGES_GAP = 120


class LevelImages:
    """Preview pictures stacked vertically with a fixed gap between them."""

    def __init__(self, textures: Sequence[Texture]) -> None:
        self.textures = list(textures)
        self.x_pos = 0
        self.y_pos = 0
        self.width = self.textures[0].width
        self.height = self.textures[0].height
        self.images_gap = _IMAGES_GAP

    @classmethod
    def load(cls, rp) -> LevelImages:
        """Load the level pictures; pure red becomes transparent."""
        textures = []
        for path in FILE_PATHS_LEVEL_IMAGES:
            texture = Texture()
            texture.load_from_file(rp, path, _CUT_COLOR)
            textures.append(texture)
        return cls(textures)

    def render(self, rp) -> None:
        step = self.images_gap + self.height
        for index, texture in enumerate(self.textures):
            texture.render(rp, self.x_pos, self.y_pos + index * step)

    def set_position(self, x: int, y: int) -> None:
        self.x_pos = x
        self.y_pos = y

    def bottom_y(self, i: int = 0) -> int:
        """Y coordinate just below picture ``i``."""
        return self.y_pos + self.height + i * (self.images_gap + self.height)