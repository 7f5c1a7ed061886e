from types import SimpleNamespace

import pygame
import pytest

from orbitguard.texture import Texture, TextureError
from orbitguard.util import Flip, Point, RotationData

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


class FakePipe:
    def __init__(self, size=(40, 40), fonts=()):
        self.surface = pygame.Surface(size)
        self.surface.fill(BLACK)
        self.fonts = list(fonts)

    def font(self, ind=0):
        return self.fonts[ind] if 0 <= ind < len(self.fonts) else None


@pytest.fixture
def fonts():
    pygame.font.init()
    return [pygame.font.Font(None, 16), pygame.font.Font(None, 24)]


def solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def test_plain_render(tmp_path):
    rp = FakePipe()
    Texture.from_surface(solid((10, 10), RED)).render(rp, 5, 5)
    assert rp.surface.get_at((7, 7))[:3] == RED
    assert rp.surface.get_at((2, 2))[:3] == BLACK


def test_rotate_half_turn_about_center():
    image = pygame.Surface((10, 4))
    image.fill(RED, pygame.Rect(0, 0, 5, 4))
    image.fill(BLUE, pygame.Rect(5, 0, 5, 4))
    rp = FakePipe(size=(10, 4))
    rd = RotationData(angle=180.0, center=Point(5, 2))
    Texture.from_surface(image).render(rp, 0, 0, None, rd)
    assert rp.surface.get_at((1, 1))[:3] == BLUE
    assert rp.surface.get_at((8, 1))[:3] == RED


def test_rotate_quarter_turn_is_clockwise():
    rp = FakePipe()
    rd = RotationData(angle=90.0, center=Point(0, 0))
    Texture.from_surface(solid((10, 4), RED)).render(rp, 20, 20, None, rd)
    assert rp.surface.get_at((18, 25))[:3] == RED
    assert rp.surface.get_at((25, 22))[:3] == BLACK


def test_vertical_flip():
    image = pygame.Surface((4, 10))
    image.fill(RED, pygame.Rect(0, 0, 4, 5))
    image.fill(BLUE, pygame.Rect(0, 5, 4, 5))
    rp = FakePipe(size=(4, 10))
    Texture.from_surface(image).render(rp, 0, 0, None, RotationData(flip=Flip.VERTICAL))
    assert rp.surface.get_at((1, 1))[:3] == BLUE
    assert rp.surface.get_at((1, 8))[:3] == RED


def test_load_from_file_applies_cut_color(tmp_path):
    image = solid((8, 6), (255, 255, 255))
    image.fill(RED, pygame.Rect(0, 0, 4, 6))
    path = tmp_path / "img.png"
    pygame.image.save(image, str(path))
    texture = Texture()
    texture.load_from_file(None, path)
    assert (texture.width, texture.height) == (8, 6)
    rp = FakePipe(size=(8, 6))
    texture.render(rp, 0, 0)
    assert rp.surface.get_at((1, 1))[:3] == RED
    assert rp.surface.get_at((6, 1))[:3] == BLACK


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(TextureError):
        Texture().load_from_file(None, tmp_path / "nope.png")


def test_free_resets_size():
    texture = Texture.from_surface(solid((3, 5), RED))
    texture.free()
    assert (texture.width, texture.height) == (0, 0)
    assert texture.surface is None


def test_alpha_zero_draws_nothing():
    rp = FakePipe()
    texture = Texture.from_surface(solid((10, 10), RED))
    texture.set_alpha(0)
    texture.render(rp, 0, 0)
    assert rp.surface.get_at((5, 5))[:3] == BLACK


def test_rendered_text_size_matches_font(fonts):
    rp = FakePipe(fonts=fonts)
    texture = Texture()
    texture.load_from_rendered_text(rp, "KILLS", (0, 192, 248, 255), 1)
    assert (texture.width, texture.height) == fonts[1].size("KILLS")


def test_rendered_text_missing_font_raises(fonts):
    with pytest.raises(TextureError):
        Texture().load_from_rendered_text(FakePipe(fonts=fonts), "X", RED, 5)


def test_long_text_keeps_blank_lines(fonts):
    texture = Texture()
    texture.load_from_rendered_long_text(FakePipe(fonts=fonts), "A\n\nB", RED, 0)
    assert texture.height == 3 * fonts[0].get_linesize()


def test_long_text_wraps_within_width(fonts):
    texture = Texture()
    texture.load_from_rendered_long_text(FakePipe(fonts=fonts), "WORD " * 200, RED, 1)
    assert 0 < texture.width <= 600
    assert texture.height > fonts[1].get_linesize()