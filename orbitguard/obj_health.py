"""Hearts that appear around the planet and restore a life when collected."""

from __future__ import annotations

import random

from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .texture import Texture
from .util import Point, RotationData, eu_mod

_SPAWN_CHANCE = 100
_HIT_RANGE = 25
_REFLECTED_HIT_RANGE = 30
_START_DISTANCE = 500


class ObjHealth:
    """A heart pickup on one ray around the planet."""

    def __init__(self, texture: Texture, rng=random) -> None:
        self._rng = rng
        self.texture = texture
        self.width, self.height = texture.width, texture.height
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = (SCREEN_HEIGHT - self.height) // 2 - _START_DISTANCE
        pivot = Point(self.width // 2, self.height // 2 + _START_DISTANCE)
        self.rotation = RotationData(0.0, pivot)
        self._draw = False

    @property
    def angle(self) -> float:
        return self.rotation.angle

    def render(self, rp) -> None:
        if self._draw:
            self.texture.render(rp, self.x_pos, self.y_pos, rd=self.rotation, clip=None)

    def calc_spawn(self) -> None:
        """Sometimes place the heart on a random ray."""
        if self._draw or self._rng.randrange(_SPAWN_CHANCE) != 0:
            return
        self._draw = True
        self.rotation.angle = float(15 * self._rng.randrange(24))
        if self._check_angle():
            self.y_pos = self._rng.randrange(50)
        else:
            self.y_pos = self._rng.randrange(200) - 400
        self.rotation.center = Point(self.width // 2, SCREEN_HEIGHT // 2 - self.y_pos)

    def detect_collision(self, ship) -> bool:
        """Collect the heart if the ship touches it; True when collected."""
        if not self._draw or not self._touched_by(ship):
            return False
        self._draw = False
        return True

    def _touched_by(self, ship) -> bool:
        heart_middle = self.y_pos + self.height // 2
        same_ray = eu_mod(ship.rotation.angle, 360) == eu_mod(self.rotation.angle, 360)
        if ship.y_pos <= SCREEN_HEIGHT // 2:
            ship_middle = ship.y_pos + ship.height // 2 - 40
            return same_ray and abs(ship_middle - heart_middle) <= _HIT_RANGE
        opposite_ray = not same_ray and (
            eu_mod(ship.rotation.angle, 180) == eu_mod(self.rotation.angle, 180)
        )
        reflected = SCREEN_HEIGHT - ship.y_pos - ship.height // 2
        return opposite_ray and abs(reflected - heart_middle) <= _REFLECTED_HIT_RANGE

    def _check_angle(self) -> bool:
        a = self.rotation.angle
        return 0 <= a <= 45 or 135 <= a <= 225 or 315 <= a <= 360

    def is_alive(self) -> bool:
        return self._draw

    def kill(self) -> None:
        self._draw = False