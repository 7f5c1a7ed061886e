"""A line or block of text drawn with a drop shadow."""

from __future__ import annotations

import logging

from .texture import Texture

logger = logging.getLogger(__name__)


class TextBox:
    """Text with a shadow shifted by ``offset`` pixels down and right."""

    def __init__(
        self,
        rp,
        text: str,
        front_color,
        shadow_color,
        offset: int = 4,
        long_text: bool = False,
        ind: int = 0,
    ) -> None:
        self.front = Texture()
        self.shadow = Texture()
        self.front_color = front_color
        self.shadow_color = shadow_color
        self.text = text
        self.x_pos = -1
        self.y_pos = -1
        self.offset = offset
        self.ind = ind
        if long_text:
            self.update_long_text(rp, text, front_color, shadow_color)
        else:
            self.update_text(rp, text, front_color, shadow_color)

    @property
    def width(self) -> int:
        return self.front.width

    @property
    def height(self) -> int:
        return self.front.height

    def update_text(self, rp, text: str, front_color, shadow_color) -> None:
        """Render ``text`` as a single line in the given colours."""
        self.front.load_from_rendered_text(rp, text, front_color, self.ind)
        self.shadow.load_from_rendered_text(rp, text, shadow_color, self.ind)

    def update_long_text(self, rp, text: str, front_color, shadow_color) -> None:
        """Render ``text`` wrapped over several lines in the given colours."""
        self.front.load_from_rendered_long_text(rp, text, front_color, self.ind)
        self.shadow.load_from_rendered_long_text(rp, text, shadow_color, self.ind)

    def render(self, rp) -> None:
        """Draw the shadow, then the text; nothing until a position is set."""
        if self.x_pos == -1 or self.y_pos == -1:
            logger.warning("text box %r has no position set", self.text)
            return
        self.shadow.render(rp, self.x_pos + self.offset, self.y_pos + self.offset)
        self.front.render(rp, self.x_pos, self.y_pos)

    def set_position(self, x_pos: int, y_pos: int) -> None:
        self.x_pos = x_pos
        self.y_pos = y_pos