"""Meteors that fall from the edge of the screen towards the planet."""

from __future__ import annotations

import math
import random
from typing import ClassVar

from .constants import (
    RAND_SPAWN,
    RAND_SPAWN_FIRST,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPAWN_ENEMY_X,
)
from .planet import Planet
from .texture import Texture, TextureError
from .util import Flip, Point, RotationData

_MAX_ON_MAP = 12
_PLANET_HIT_RANGE = 190


class Enemy:
    """A meteor travelling along one ray towards the screen centre."""

    on_map: ClassVar[int] = 0

    def __init__(self, rng=random) -> None:
        self._rng = rng
        self.texture: Texture | None = None
        self.width = self.height = 0
        self.x_pos = self.y_pos = 0
        self.shift = 0
        self.rotation = RotationData(0.0, Point(0, 0), Flip.VERTICAL)
        self._draw = False
        self.first_spawn = True
        self._calc_speed()
        Enemy.on_map = 0

    @property
    def angle(self) -> float:
        return self.rotation.angle

    @angle.setter
    def angle(self, value: float) -> None:
        self.rotation.angle = value

    def _place_at_spawn(self) -> None:
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = SPAWN_ENEMY_X - (SCREEN_WIDTH - SCREEN_HEIGHT) // 2
        distance_to_centre = SCREEN_HEIGHT // 2 - self.y_pos
        self.rotation.center = Point(self.width // 2, distance_to_centre)

    def set_texture(self, texture: Texture) -> None:
        self.texture = texture
        self.width, self.height = texture.width, texture.height
        self._place_at_spawn()

    def reinit(self) -> None:
        """Send the meteor back to its spawn point, hidden."""
        self._place_at_spawn()
        self._calc_speed()
        self._draw = False
        self.first_spawn = False
        Enemy.on_map = max(Enemy.on_map - 1, 0)

    def render(self, rp) -> None:
        if self.texture is None:
            raise TextureError("no texture loaded for enemy object")
        self.texture.render(rp, self.x_pos, self.y_pos, clip=None, rd=self.rotation)

    def move(self, delta_time: float) -> bool:
        """Advance one frame; returns False on the frame the meteor spawns."""
        spawn_chance = RAND_SPAWN_FIRST if self.first_spawn else RAND_SPAWN
        if (
            not self._draw
            and Enemy.on_map < _MAX_ON_MAP
            and self._rng.randrange(spawn_chance) == 0
        ):
            self._draw = True
            Enemy.on_map += 1
            return False
        if self._draw:
            step = math.floor(self.shift * delta_time)
            self.y_pos += step
            self.rotation.center.y -= step
        return True

    def detect_planet_collision(self, planet: Planet) -> bool:
        hit = self.is_planet_hit(planet)
        if hit:
            self.reinit()
        return hit

    def is_planet_hit(self, planet: Planet) -> bool:
        middle = self.y_pos + self.height // 2
        return abs(SCREEN_HEIGHT // 2 - middle) <= _PLANET_HIT_RANGE

    def is_alive(self) -> bool:
        return self._draw

    def _calc_speed(self) -> None:
        if self._rng.randrange(6) == 0:
            self.shift = 250 + self._rng.randrange(40)
        else:
            self.shift = 70 + self._rng.randrange(90)