"""A drone that flies out from the planet, fetches a heart and brings it home."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import IntEnum

from .constants import FILE_PATH_HEALTH_MODULE, SCREEN_HEIGHT, SCREEN_WIDTH
from .obj_health import ObjHealth
from .texture import Texture
from .util import Flip, Point, RotationData

logger = logging.getLogger(__name__)

_SPEED = 130
_KILLS_TO_UNLOCK = 150
_HEART_HIT_RANGE = 20
_PLANET_HIT_RANGE = 50


class _Image(IntEnum):
    FORWARD = 0
    BACKWARD = 1


class HealthModule:
    """Flies to a live heart, collects it and returns it to the planet."""

    def __init__(self, textures: Sequence[Texture]) -> None:
        self.textures = list(textures)
        self.width = self.textures[_Image.FORWARD].width
        self.height = self.textures[_Image.FORWARD].height
        self.speed = _SPEED
        self.rotation = RotationData()
        self.image = _Image.FORWARD
        self.x_pos = 0
        self.y_pos = 0
        self._alive = False
        self.got_heart = False
        self.target: int | None = None
        self._reinit()

    @classmethod
    def load(cls, rp) -> HealthModule:
        """Load the drone pictures and build an idle drone."""
        textures = []
        for path in FILE_PATH_HEALTH_MODULE:
            texture = Texture()
            texture.load_from_file(rp, path)
            textures.append(texture)
        return cls(textures)

    def is_alive(self) -> bool:
        return self._alive

    def render(self, rp, delta_time: float, hearts: Sequence[ObjHealth]) -> bool:
        """Advance and draw; True on the frame a heart is delivered to the planet."""
        if not self._alive or self.target is None:
            return False
        delivered = False
        if not self.got_heart:
            self._move_to_heart(delta_time, hearts[self.target])
        else:
            delivered = self._move_to_planet(delta_time)
        self._render_image(rp)
        return delivered

    def calc_spawn(self, ship, planet, hearts: Sequence[ObjHealth]) -> None:
        """Launch towards the first live heart when lives are missing and enough kills are made."""
        if self._alive:
            return
        lifes_full = (
            planet.curr_lifes >= planet.max_lifes and ship.curr_lifes >= ship.max_lifes
        )
        if ship.kills < _KILLS_TO_UNLOCK or lifes_full:
            self._alive = False
            return
        for index, heart in enumerate(hearts):
            if heart.is_alive():
                self.rotation.angle = heart.angle
                self.target = index
                self._alive = True
                return
        self._alive = False

    def _render_image(self, rp) -> None:
        if not self._alive:
            return
        self.textures[self.image].render(rp, self.x_pos, self.y_pos, None, self.rotation)

    def _reinit(self) -> None:
        self.image = _Image.FORWARD
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = (SCREEN_HEIGHT - self.height) // 2
        self._alive = False
        self.got_heart = False
        self.rotation = RotationData(0.0, Point(self.width // 2, self.height // 2), Flip.NONE)
        self.target = None

    def _detect_collision_heart(self, heart: ObjHealth) -> bool:
        if not self._alive:
            return False
        if heart.angle != self.rotation.angle:
            logger.warning(
                "heart angle %s differs from module angle %s", heart.angle, self.rotation.angle
            )
        mid_module = self.y_pos + self.height // 2
        mid_heart = heart.y_pos + heart.height // 2
        return abs(mid_module - mid_heart) <= _HEART_HIT_RANGE

    def _detect_collision_planet(self) -> bool:
        if not self._alive:
            return False
        mid_module = self.y_pos + self.height // 2
        return abs(SCREEN_HEIGHT // 2 - mid_module) <= _PLANET_HIT_RANGE

    def _move_to_heart(self, delta_time: float, heart: ObjHealth) -> None:
        if not heart.is_alive():
            self._reinit()
        if self._detect_collision_heart(heart):
            heart.kill()
            self.got_heart = True
            self.image = _Image.BACKWARD
            return
        step = math.floor(self.speed * delta_time)
        self.y_pos -= step
        self.rotation.center.y += step

    def _move_to_planet(self, delta_time: float) -> bool:
        if self._detect_collision_planet():
            delivered = self.got_heart
            self._reinit()
            return delivered
        step = math.floor(self.speed * delta_time)
        self.y_pos += step
        self.rotation.center.y -= step
        return False