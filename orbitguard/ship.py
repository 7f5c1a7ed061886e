"""The player's ship, which flies along a ray around the planet and shoots meteors."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from enum import IntEnum

from .constants import (
    FILE_PATHS_SHIP_1,
    FILE_PATHS_SHIP_2,
    KILLS_TO_WIN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .enemy import Enemy
from .texture import Texture
from .timer import Timer
from .util import Point, RotationData, eu_mod


class ShipImage(IntEnum):
    """Index of the ship picture currently shown."""

    DEFAULT = 0
    MOVE_FORWARD = 1
    SHOOT = 2
    MOVE_BACKWARD = 3
    RELOAD = 4
    TRIPLE = 5


class GunState(IntEnum):
    """Which gun the ship is firing."""

    DEFAULT = 0
    TRIPLE = 1


KILL_STREAK_TRIPLE = 8
DEFAULT_GUN_BULLETS = 6
TRIPLE_GUN_BULLETS = 4

_WHITE = (0xFF, 0xFF, 0xFF)
_BLACK = (0x00, 0x00, 0x00)
_RADIAL_SPEED = 480
_HIT_RANGE = 75
_TRIPLE_SPREAD = (-15, 0, 15)
_SHIP_PATHS = {0: FILE_PATHS_SHIP_1, 1: FILE_PATHS_SHIP_2}


class Ship:
    """The player's ship: position on its ray, guns, lives and kill count."""

    def __init__(
        self,
        textures: Sequence[Texture],
        max_lifes: int = 2,
        max_bullets: int = DEFAULT_GUN_BULLETS,
        cooldown: int = 1500,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.textures = list(textures)
        self.vel_r = 0
        self.vel_ang = 0
        self.moving_r = False
        self.moving_ang = False
        self.curr_lifes = max_lifes
        self.max_lifes = max_lifes
        self.max_bullets = max_bullets
        self.curr_bullets = max_bullets
        self.cooldown = cooldown
        self.cooldown_timer = Timer(clock)
        self.kill_streak = 0
        self.kills = 0
        self.image = ShipImage.DEFAULT
        self.gun_state = GunState.DEFAULT
        self.width = self._image_width(ShipImage.DEFAULT)
        self.height = self._image_height(ShipImage.DEFAULT)
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = (SCREEN_HEIGHT - self.height) // 2
        self.rotation = RotationData(0.0, Point(self.width // 2, self.height // 2))

    @classmethod
    def load(cls, rp, ship_type, max_lifes=2, max_bullets=DEFAULT_GUN_BULLETS, cooldown=1500):
        """Load the pictures of ship ``ship_type`` (0 or 1) and build the ship."""
        try:
            paths = _SHIP_PATHS[ship_type]
        except KeyError:
            raise ValueError(f"wrong ship type: {ship_type}") from None
        textures = []
        for index, path in enumerate(paths):
            texture = Texture()
            texture.load_from_file(rp, path, _BLACK if index == ShipImage.RELOAD else _WHITE)
            textures.append(texture)
        return cls(textures, max_lifes, max_bullets, cooldown)

    @property
    def angle(self) -> float:
        return self.rotation.angle

    @angle.setter
    def angle(self, value: float) -> None:
        self.rotation.angle = value

    def render(self, rp) -> None:
        if self._is_reloaded():
            self.image = ShipImage.DEFAULT
        if self._is_image_high():
            self._render_high_image(rp)
        else:
            self.textures[self.image].render(rp, self.x_pos, self.y_pos, None, self.rotation)

    def move(self, delta_time: float) -> None:
        distance_to_center = abs(self.y_pos + 128 - SCREEN_HEIGHT // 2)
        if self.moving_ang:
            turn = abs((-0.20 * distance_to_center + 200) * delta_time)
            self.rotation.angle += -turn if self.vel_ang < 0 else turn
        if self.moving_r:
            step = math.floor(_RADIAL_SPEED * delta_time)
            if self.vel_r < 0:
                self.y_pos -= step
                self.rotation.center.y += step
            else:
                self.y_pos += step
                self.rotation.center.y -= step

    def _streak_earns_triple(self) -> bool:
        return self.kill_streak != 0 and self.kill_streak % KILL_STREAK_TRIPLE == 0

    def _arm_triple(self) -> None:
        self.gun_state = GunState.TRIPLE
        self.max_bullets = TRIPLE_GUN_BULLETS
        self.curr_bullets = self.max_bullets

    def process_shooting(self, enemies: Sequence[Enemy]) -> None:
        """Fire if a bullet is left, switching to the triple gun on a long streak."""
        if self.curr_bullets <= 0:
            return
        if self.gun_state == GunState.DEFAULT and self._streak_earns_triple():
            self._arm_triple()
        self.shoot(enemies)

    def shoot(self, enemies: Sequence[Enemy]) -> None:
        self.curr_bullets -= 1
        if self.gun_state == GunState.TRIPLE:
            self._triple_shoot(enemies)
        else:
            self._default_shoot(enemies)

    def change_shoot_animation(self) -> None:
        if self.curr_bullets <= 0:
            self.image = ShipImage.RELOAD
        elif self.gun_state == GunState.TRIPLE or self._streak_earns_triple():
            self.image = ShipImage.TRIPLE
        else:
            self.image = ShipImage.SHOOT

    def calc_cooldown(self) -> None:
        """Refill an empty gun: at once when switching guns, else after the cooldown."""
        if self.curr_bullets > 0:
            return
        if self.gun_state != GunState.DEFAULT:
            self.gun_state = GunState.DEFAULT
            self.max_bullets = DEFAULT_GUN_BULLETS
            self.curr_bullets = self.max_bullets
            return
        if self._streak_earns_triple():
            self._arm_triple()
            return
        if not self.cooldown_timer.is_started():
            self.cooldown_timer.start()
        if self.cooldown_timer.ticks() >= self.cooldown:
            self.cooldown_timer.stop()
            self.curr_bullets = self.max_bullets

    def detect_collision(self, enemies: Iterable[Enemy]) -> None:
        """Lose a life for each live meteor touching the ship, destroying it."""
        mid_ship_y = self.y_pos + self.height // 2 - 40
        reflection_y = -self.y_pos - self.height // 2 + SCREEN_HEIGHT
        ship_full = eu_mod(self.rotation.angle, 360)
        ship_half = eu_mod(self.rotation.angle, 180)
        for enemy in enemies:
            if not enemy.is_alive():
                continue
            mid_enemy_y = enemy.y_pos + enemy.height // 2
            if self.y_pos <= SCREEN_HEIGHT // 2:
                hit = ship_full == eu_mod(enemy.angle, 360) and abs(mid_ship_y - mid_enemy_y) <= _HIT_RANGE
            else:
                hit = (
                    ship_full != eu_mod(enemy.angle, 360)
                    and ship_half == eu_mod(enemy.angle, 180)
                    and abs(reflection_y - mid_enemy_y) <= _HIT_RANGE
                )
            if hit:
                enemy.reinit()
                self.curr_lifes -= 1

    def is_fighting(self) -> bool:
        return self.curr_lifes != 0 and self.kills < KILLS_TO_WIN

    def _is_reloaded(self) -> bool:
        return self.image == ShipImage.RELOAD and self.curr_bullets > 0

    def _is_image_high(self) -> bool:
        return self._image_height(ShipImage.DEFAULT) < self._image_height(self.image)

    def _render_high_image(self, rp) -> None:
        image_height = self._image_height(self.image)
        image_width = self._image_width(self.image)
        rotation = self.rotation.copy()
        rotation.center.y += image_height - self.height
        rotation.center.x = image_width // 2
        x = (SCREEN_WIDTH - image_width) // 2
        y = self.y_pos - image_height + self.height
        self.textures[self.image].render(rp, x, y, None, rotation)

    def _image_height(self, image: int) -> int:
        return self.textures[image].height

    def _image_width(self, image: int) -> int:
        return self.textures[image].width

    @staticmethod
    def _is_angle_sync(angle: float, enemy: Enemy) -> bool:
        return enemy.is_alive() and eu_mod(angle, 360) == enemy.angle

    def _default_shoot(self, enemies: Iterable[Enemy]) -> None:
        for enemy in enemies:
            if self._is_angle_sync(self.rotation.angle, enemy):
                enemy.reinit()
                self.kills += 1
                self.kill_streak += 1
                return
        self.kill_streak = 0

    def _triple_shoot(self, enemies: Iterable[Enemy]) -> None:
        old_kills = self.kills
        for enemy in enemies:
            for spread in _TRIPLE_SPREAD:
                if self._is_angle_sync(self.rotation.angle + spread, enemy):
                    enemy.reinit()
                    self.kills += 1
        self.kill_streak = self.kill_streak + 1 if self.kills != old_kills else 0