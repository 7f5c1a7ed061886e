"""Pickup that hands the player a new orbital probe."""

from __future__ import annotations

import random

from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .texture import Texture
from .util import Point, RotationData, eu_mod

_HIT_RANGE = 25
_REFLECTED_HIT_RANGE = 10


class ObjOrbit:
    """A probe pickup that appears near the planet after certain kill counts."""

    def __init__(self, texture: Texture, rng=None) -> None:
        self._rng = rng if rng is not None else random
        self.texture = texture
        self.width = texture.width
        self.height = texture.height
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = (SCREEN_HEIGHT - self.height) // 2
        self.rotation = RotationData(0.0, Point(self.width // 2, self.height // 2))
        self._draw = False

    def render(self, rp) -> None:
        if not self._draw:
            return
        self.texture.render(rp, self.x_pos, self.y_pos, None, self.rotation)

    def calc_spawn(self, ship, orbit) -> None:
        """Appear on a random ray when no probe flies and the kill count allows it."""
        if self._draw or orbit.is_alive() or not self._check_kills(ship.kills):
            return
        self._draw = True
        self.rotation.angle = float(self._rng.randrange(24) * 15)
        self.y_pos = self._rng.randrange(10) - self.height // 2
        self.rotation.center = Point(self.width // 2, SCREEN_HEIGHT // 2 - self.y_pos)

    @staticmethod
    def _check_kills(kills: int) -> bool:
        if kills < 3:
            return False
        return kills % 50 in (0, 1, 2)

    def detect_collision(self, ship) -> bool:
        """Pick up the probe if the ship touches it; True when picked up."""
        if not self._draw:
            return False
        mid_ship_y = ship.y_pos + ship.height // 2 - 40
        mid_obj_y = self.y_pos + self.height // 2
        ship_full = eu_mod(ship.rotation.angle, 360)
        own_full = eu_mod(self.rotation.angle, 360)
        if ship.y_pos <= SCREEN_HEIGHT // 2:
            if ship_full == own_full and abs(mid_ship_y - mid_obj_y) <= _HIT_RANGE:
                self._draw = False
                return True
            return False
        if ship_full != own_full and eu_mod(ship.rotation.angle, 180) == eu_mod(self.rotation.angle, 180):
            reflection_y = -ship.y_pos - ship.height // 2 + SCREEN_HEIGHT
            if abs(reflection_y - mid_obj_y) <= _REFLECTED_HIT_RANGE:
                self._draw = False
                return True
        return False

    def is_alive(self) -> bool:
        return self._draw