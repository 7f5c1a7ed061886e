import pygame
import pytest

from orbitguard.constants import HELP_TEXT
from orbitguard.text_box import TextBox
from orbitguard.texture import TextureError

FRONT = (255, 255, 255, 255)
SHADOW = (0, 0, 255, 255)


class _RP:
    def __init__(self, size=(400, 200)):
        pygame.font.init()
        self.surface = pygame.Surface(size)
        self.surface.fill((0, 0, 0))
        self.fonts = [pygame.font.Font(None, s) for s in (16, 21, 24)]

    def font(self, ind=0):
        return self.fonts[ind] if 0 <= ind < len(self.fonts) else None


def _colors(surface, rect):
    x0, y0, w, h = rect
    return {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(x0, x0 + w)
        for y in range(y0, y0 + h)
    }


def test_size_follows_front_text():
    rp = _RP()
    box = TextBox(rp, "QUIT", FRONT, SHADOW)
    assert box.width == box.front.width
    assert box.height == box.front.height
    assert box.width > 0


def test_longer_text_is_wider():
    rp = _RP()
    short = TextBox(rp, "QUIT", FRONT, SHADOW)
    longer = TextBox(rp, "QUIT QUIT QUIT", FRONT, SHADOW)
    assert longer.width > short.width


def test_long_text_spans_several_lines():
    rp = _RP()
    single = TextBox(rp, "USE SPACE TO SHOOT,", FRONT, SHADOW, 2, False, 0)
    block = TextBox(rp, HELP_TEXT, FRONT, SHADOW, 2, True, 0)
    assert block.height > single.height * 5


def test_render_without_position_draws_nothing():
    rp = _RP()
    box = TextBox(rp, "PLAY", FRONT, SHADOW)
    box.render(rp)
    assert tuple(pygame.transform.average_color(rp.surface))[:3] == (0, 0, 0)


def test_render_draws_text_and_shadow():
    rp = _RP()
    box = TextBox(rp, "PLAY", FRONT, SHADOW, offset=4)
    box.set_position(10, 10)
    box.render(rp)
    front_area = _colors(rp.surface, (10, 10, box.width, box.height))
    shadow_area = _colors(rp.surface, (14, 14, box.width, box.height))
    assert FRONT[:3] in front_area
    assert SHADOW[:3] in shadow_area


def test_update_text_changes_colour():
    rp = _RP()
    box = TextBox(rp, "HELP", FRONT, SHADOW)
    box.update_text(rp, "HELP", (255, 0, 0, 255), SHADOW)
    box.set_position(10, 10)
    box.render(rp)
    area = _colors(rp.surface, (10, 10, box.width, box.height))
    assert (255, 0, 0) in area
    assert FRONT[:3] not in area


def test_missing_font_raises():
    rp = _RP()
    with pytest.raises(TextureError):
        TextBox(rp, "PLAY", FRONT, SHADOW, ind=7)