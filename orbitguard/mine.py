"""Mines dropped by the orbital probe that destroy meteors on contact."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .enemy import Enemy
from .texture import Texture, TextureError
from .util import Point, RotationData, positive_angle

_ANGLE_TOLERANCE = 8
_HIT_RANGE = 50


class Mine:
    """A stationary mine on one ray around the planet."""

    def __init__(self) -> None:
        self.width = self.height = 0
        self.x_pos = self.y_pos = 0
        self._alive = False
        self.rotation = RotationData()
        self.texture: Texture | None = None

    def set_texture(self, texture: Texture) -> None:
        self.texture = texture
        self.width = texture.width
        self.height = texture.height

    def render(self, rp) -> None:
        if not self._alive:
            return
        texture = self.texture
        if texture is None:
            raise TextureError("no texture loaded for mine object")
        texture.render(rp, self.x_pos, self.y_pos, None, self.rotation)

    def drop(self, y_pos: int, angle: float) -> None:
        """Place the mine; does nothing if it is already placed."""
        if self._alive:
            return
        self._alive = True
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = y_pos
        self.rotation.angle = angle
        pivot_y = SCREEN_HEIGHT // 2 - y_pos
        self.rotation.center = Point(self.width // 2, pivot_y)

    def death(self) -> None:
        self._alive = False

    def is_alive(self) -> bool:
        return self._alive

    def detect_collision(self, enemies: Iterable[Enemy]) -> None:
        """Destroy every live meteor touching the mine, and the mine with it."""
        if not self._alive:
            return
        mine_middle = self.y_pos + self.height // 2
        own_angle = positive_angle(self.rotation.angle)
        for enemy in enemies:
            if enemy.is_alive() and self._touches(enemy, own_angle, mine_middle):
                self.death()
                enemy.reinit()

    @classmethod
    def _touches(cls, enemy: Enemy, own_angle: float, mine_middle: int) -> bool:
        enemy_middle = enemy.y_pos + enemy.height // 2
        return (
            cls._check_angle(own_angle, enemy.angle)
            and abs(mine_middle - enemy_middle) <= _HIT_RANGE
        )

    @staticmethod
    def _check_angle(angle1: float, angle2: float) -> bool:
        if angle2 == 0 and angle1 > 345:
            angle1 -= 360
        return abs(angle1 - angle2) <= _ANGLE_TOLERANCE