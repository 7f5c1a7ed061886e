"""Small shared helpers: rotation data for rendering and integer arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntFlag


class Flip(IntFlag):
    """Mirroring applied to a texture before it is rotated."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


@dataclass
class Point:
    """An integer point, relative to the top-left corner of a drawn image."""

    x: int = 0
    y: int = 0


@dataclass
class RotationData:
    """Angle (clockwise degrees), pivot and mirroring used when drawing."""

    angle: float = 0.0
    center: Point = field(default_factory=Point)
    flip: Flip = Flip.NONE

    def copy(self) -> RotationData:
        """Return an independent copy."""
        return RotationData(self.angle, Point(self.center.x, self.center.y), self.flip)


def _c_remainder(num: int, mod: int) -> int:
    """Remainder that takes the sign of the dividend."""
    r = abs(num) % abs(mod)
    return -r if num < 0 else r


def eu_mod(num: float, mod: int) -> int:
    """Euclidean remainder of ``num`` (truncated to an integer) by ``mod``."""
    r = _c_remainder(int(num), int(mod))
    if r < 0:
        r += int(mod)
    return r


def positive_angle(angle: float) -> float:
    """Shift a negative angle by whole turns into the range 0..360."""
    if angle < 0:
        turns = int(math.trunc(angle) / 360)
        angle += -turns * 360 + 360
    return angle