"""The orbital probe that circles the planet, shields it and drops mines."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from .constants import FILE_PATHS_ORBIT, SCREEN_WIDTH
from .enemy import Enemy
from .mine import Mine
from .texture import Texture
from .util import RotationData, positive_angle

_CUT_COLOR = (0xFF, 0xFF, 0xFF)
_BASE_SPEED = 20.0
_ANGLE_TOLERANCE = 10
_HIT_RANGE = 90
_DROP_CHANCE = 300


def _load_texture(rp, path: str) -> Texture:
    texture = Texture()
    texture.load_from_file(rp, path, _CUT_COLOR)
    return texture


class Orbit:
    """An orbital probe that turns around the planet while it has lives."""

    NUM_MINES = 8
    IMAGE_DEFAULT = 0
    IMAGE_MOVE = 1

    def __init__(self, textures: Sequence[Texture], rng=random) -> None:
        self._rng = rng
        self.textures = list(textures)
        self.x_pos = self.y_pos = 0
        self._alive = False
        self.curr_lifes = 0
        self.max_lifes = 4
        self.mines = [Mine() for _ in range(self.NUM_MINES)]
        self.curr_mine = 0
        self.mines_thrown = 0
        self.rotation = RotationData()
        self.speed = _BASE_SPEED
        self.image = self.IMAGE_DEFAULT
        first = self.textures[self.IMAGE_DEFAULT]
        self.width, self.height = first.width, first.height

    @classmethod
    def load(cls, rp):
        """Load the probe pictures and build an inactive probe."""
        return cls([_load_texture(rp, path) for path in FILE_PATHS_ORBIT])

    def render(self, rp) -> None:
        if self._alive:
            picture = self.textures[self.image]
            picture.render(rp, self.x_pos, self.y_pos, clip=None, rd=self.rotation)

    def render_mines(self, rp) -> None:
        for mine in self.mines:
            mine.render(rp)

    def set_mines_texture(self, texture: Texture) -> None:
        for mine in self.mines:
            mine.set_texture(texture)

    def calc_drop_mine(self) -> None:
        """Sometimes drop the next free mine at the probe's place."""
        if not self._ready_to_drop_mine():
            return
        for _ in range(self.NUM_MINES):
            mine = self.mines[self.curr_mine]
            self.curr_mine = (self.curr_mine + 1) % self.NUM_MINES
            if not mine.is_alive():
                mine.drop(self.y_pos, self.rotation.angle)
                self.mines_thrown += 1
                return

    def _ready_to_drop_mine(self) -> bool:
        return (
            self._alive
            and self.mines_thrown < self.NUM_MINES
            and self._rng.randrange(_DROP_CHANCE) == 0
        )

    def reinit(self, y_pos: int, rotation: RotationData) -> None:
        """Bring the probe to life at ``y_pos`` with a copy of ``rotation``."""
        self.image = self.IMAGE_DEFAULT
        self.speed = _BASE_SPEED
        self.x_pos = (SCREEN_WIDTH - self.width) // 2
        self.y_pos = y_pos
        self.rotation = rotation.copy()
        self._alive = True
        self.curr_lifes = self.max_lifes
        self.mines_thrown = 0

    def move(self, delta_time: float) -> None:
        if self._alive:
            self.rotation.angle -= self.speed * delta_time

    def detect_collision(self, enemies: Iterable[Enemy]) -> None:
        """Destroy meteors hitting the probe; each costs it a life."""
        if not self._alive:
            return
        own_angle = positive_angle(self.rotation.angle)
        probe_middle = self.y_pos + self.textures[self.image].height // 2
        hits = [
            enemy
            for enemy in enemies
            if enemy.is_alive()
            and self._check_angle(own_angle, enemy.angle)
            and abs(probe_middle - enemy.y_pos - enemy.height // 2) <= _HIT_RANGE
        ]
        for enemy in hits:
            enemy.reinit()
        self.curr_lifes -= len(hits)
        if self.curr_lifes <= 0:
            self.death()

    def process_mines_collision(self, enemies: Sequence[Enemy]) -> None:
        for mine in self.mines:
            mine.detect_collision(enemies)

    def death(self) -> None:
        self._alive = False

    def change_speed(self, velocity: float) -> None:
        """Change the angular speed and show the matching picture."""
        if self._alive:
            self.speed += velocity
            self.change_animation_move(velocity)

    def change_animation_move(self, velocity: float) -> None:
        self.image = self.IMAGE_MOVE if velocity >= 0 else self.IMAGE_DEFAULT

    @staticmethod
    def _check_angle(angle1: float, angle2: float) -> bool:
        return angle2 - _ANGLE_TOLERANCE <= angle1 <= angle2 + _ANGLE_TOLERANCE

    def is_alive(self) -> bool:
        return self._alive