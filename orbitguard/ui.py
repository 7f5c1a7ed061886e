"""Shared pictures and the in-game bars for hearts and bullets."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .constants import (
    FILE_PATH_BACKGROUND,
    FILE_PATH_MINE,
    FILE_PATHS_ENEMY,
    FILE_PATHS_UI,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHIFT_HEART_PLANET_Y,
    SHIFT_HEART_SHIP_Y,
)
from .ship import GunState
from .texture import Texture


class UIImage(IntEnum):
    RED_HEART = 0
    BLACK_HEART = 1
    BULLET = 2
    EMPTY_BULLET = 3
    ORBIT_ELEMENT = 4
    BLUE_BULLET = 5


class EnemyImage(IntEnum):
    METEOR = 0


class Background(IntEnum):
    GAME_BACK1 = 0
    MENU_BACK = 1
    GAME_BACK2 = 2


def _load_all(rp, paths) -> list[Texture]:
    textures = []
    for path in paths:
        texture = Texture()
        texture.load_from_file(rp, path)
        textures.append(texture)
    return textures


class UI:
    """Holds small pictures, backgrounds and draws the status bars."""

    def __init__(
        self,
        ui_textures: Sequence[Texture],
        enemy_textures: Sequence[Texture],
        backgrounds: Sequence[Texture],
        mine_texture: Texture,
    ) -> None:
        self.ui_textures = list(ui_textures)
        self.enemy_textures = list(enemy_textures)
        self.backgrounds = list(backgrounds)
        self.mine_texture = mine_texture
        self.image_background = Background.MENU_BACK

    @classmethod
    def load(cls, rp) -> UI:
        """Load every shared picture from the resource directory."""
        ui_textures = _load_all(rp, FILE_PATHS_UI)
        enemy_textures = _load_all(rp, FILE_PATHS_ENEMY)
        backgrounds = _load_all(rp, FILE_PATH_BACKGROUND)
        (mine_texture,) = _load_all(rp, (FILE_PATH_MINE,))
        return cls(ui_textures, enemy_textures, backgrounds, mine_texture)

    def ui_texture(self, image: int) -> Texture:
        return self.ui_textures[image]

    def enemy_texture(self, image: int) -> Texture:
        return self.enemy_textures[image]

    def _render_bar(self, rp, full_image, empty_image, filled, total, shift_y) -> None:
        for i in range(filled):
            self.ui_textures[full_image].render(
                rp,
                self.calc_render_x(full_image, i, total),
                self.calc_render_y(full_image) + shift_y,
            )
        for i in range(filled, total):
            self.ui_textures[empty_image].render(
                rp,
                self.calc_render_x(empty_image, i, total),
                self.calc_render_y(empty_image) + shift_y,
            )

    def render_planet_health(self, rp, planet) -> None:
        self._render_bar(
            rp,
            UIImage.RED_HEART,
            UIImage.BLACK_HEART,
            planet.curr_lifes,
            planet.max_lifes,
            SHIFT_HEART_PLANET_Y,
        )

    def render_ship_health(self, rp, ship) -> None:
        self._render_bar(
            rp,
            UIImage.RED_HEART,
            UIImage.BLACK_HEART,
            ship.curr_lifes,
            ship.max_lifes,
            SHIFT_HEART_PLANET_Y + SHIFT_HEART_SHIP_Y,
        )

    def render_ship_bullets(self, rp, ship) -> None:
        bullet = UIImage.BULLET if ship.gun_state == GunState.DEFAULT else UIImage.BLUE_BULLET
        self._render_bar(
            rp,
            bullet,
            UIImage.EMPTY_BULLET,
            ship.curr_bullets,
            ship.max_bullets,
            SHIFT_HEART_PLANET_Y + 2 * SHIFT_HEART_SHIP_Y,
        )

    def render_background(self, rp) -> None:
        self.backgrounds[self.image_background].render(rp, 0, 0)

    def reset_image_background(self, image: Background) -> None:
        self.image_background = image

    def calc_render_x(self, image: int, obj_num: int, objs_in_ui_bar: int) -> int:
        """X of item ``obj_num`` in a bar of ``objs_in_ui_bar`` centred on the screen."""
        order_in_bar = obj_num - int(objs_in_ui_bar / 2)
        return SCREEN_WIDTH // 2 + order_in_bar * self.ui_textures[image].width

    def calc_render_y(self, image: int) -> int:
        """Y that centres picture ``image`` vertically on the screen."""
        return int((SCREEN_HEIGHT - self.ui_textures[image].height) / 2)