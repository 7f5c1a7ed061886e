import pytest

from orbitguard.constants import SCREEN_HEIGHT
from orbitguard.obj_orbit import ObjOrbit
from orbitguard.orbit import Orbit
from orbitguard.ship import Ship
from orbitguard.texture import Texture
from orbitguard.util import RotationData


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        return self.values.pop(0)


class ZeroRng:
    def randrange(self, n):
        return 0


def make_texture(width, height):
    texture = Texture()
    texture.width = width
    texture.height = height
    return texture


def make_ship(kills=0):
    ship = Ship([make_texture(128, 128) for _ in range(6)])
    ship.kills = kills
    return ship


def make_orbit():
    return Orbit([make_texture(100, 50), make_texture(100, 60)], rng=ZeroRng())


@pytest.mark.parametrize(
    "kills, spawns",
    [(0, False), (2, False), (50, True), (52, True), (53, False), (101, True), (149, False)],
)
def test_spawn_depends_on_kill_count(kills, spawns):
    pickup = ObjOrbit(make_texture(32, 32), rng=ZeroRng())
    pickup.calc_spawn(make_ship(kills), make_orbit())
    assert pickup.is_alive() is spawns


def test_no_spawn_while_probe_flies():
    pickup = ObjOrbit(make_texture(32, 32), rng=ZeroRng())
    orbit = make_orbit()
    orbit.reinit(400, RotationData())
    pickup.calc_spawn(make_ship(50), orbit)
    assert pickup.is_alive() is False


def test_spawn_places_pickup_on_ray():
    pickup = ObjOrbit(make_texture(32, 32), rng=ScriptedRng([3, 7]))
    pickup.calc_spawn(make_ship(50), make_orbit())
    assert pickup.rotation.angle == 45.0
    assert pickup.y_pos == 7 - pickup.height // 2
    assert pickup.y_pos + pickup.rotation.center.y == SCREEN_HEIGHT // 2


def spawned_pickup():
    pickup = ObjOrbit(make_texture(32, 32), rng=ZeroRng())
    pickup.calc_spawn(make_ship(50), make_orbit())
    return pickup


def test_ship_picks_up_on_equivalent_angle():
    ship = make_ship()
    ship.rotation.angle = 360.0
    pickup = spawned_pickup()
    pickup.y_pos = ship.y_pos + ship.height // 2 - 40 - pickup.height // 2
    assert pickup.detect_collision(ship) is True
    assert pickup.is_alive() is False
    assert pickup.detect_collision(ship) is False


def test_far_pickup_is_missed():
    ship = make_ship()
    pickup = spawned_pickup()
    pickup.y_pos = ship.y_pos + ship.height // 2 - 40 - pickup.height // 2 + 100
    assert pickup.detect_collision(ship) is False
    assert pickup.is_alive() is True


def test_reflected_pickup_has_narrow_range():
    ship = make_ship()
    ship.y_pos = SCREEN_HEIGHT // 2 + 160
    reflection = -ship.y_pos - ship.height // 2 + SCREEN_HEIGHT
    pickup = spawned_pickup()
    pickup.rotation.angle = 180.0
    pickup.y_pos = reflection - pickup.height // 2 + 20
    assert pickup.detect_collision(ship) is False
    pickup.y_pos = reflection - pickup.height // 2 + 5
    assert pickup.detect_collision(ship) is True