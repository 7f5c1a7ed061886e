"""The kill counter shown at the bottom of the screen."""

from __future__ import annotations

from .constants import COLOR_MAIN_PASS, COLOR_SHADOW_PASS, KILLS_TO_WIN, SCREEN_HEIGHT, SCREEN_WIDTH
from .texture import Texture

_FONT_INDEX = 1
_SHADOW_OFFSET = 4


class KillBar:
    """Shows ``KILLS: n/total``, re-rendered only when the count changes."""

    def __init__(self, rp) -> None:
        self.max_kills = KILLS_TO_WIN
        self.curr_kills = 0
        self.color = COLOR_MAIN_PASS
        self.color_shadow = COLOR_SHADOW_PASS
        self.text_texture = Texture()
        self.shadow = Texture()
        self.text = f"KILLS: 0/{self.max_kills}"
        self._rerender(rp)

    def _rerender(self, rp) -> None:
        self.text_texture.load_from_rendered_text(rp, self.text, self.color, _FONT_INDEX)
        self.shadow.load_from_rendered_text(rp, self.text, self.color_shadow, _FONT_INDEX)

    def render(self, rp, ship) -> None:
        if self.curr_kills != ship.kills:
            self.curr_kills = ship.kills
            self.text = f"KILLS: {self.curr_kills}/{KILLS_TO_WIN}"
            self._rerender(rp)
        self.shadow.render(
            rp,
            (SCREEN_WIDTH - self.shadow.width) // 2 + _SHADOW_OFFSET,
            SCREEN_HEIGHT - self.shadow.height + _SHADOW_OFFSET,
        )
        self.text_texture.render(
            rp,
            (SCREEN_WIDTH - self.text_texture.width) // 2,
            SCREEN_HEIGHT - self.text_texture.height,
        )