from types import SimpleNamespace

import pygame

from orbitguard.enemy import Enemy
from orbitguard.orbit import Orbit
from orbitguard.texture import Texture
from orbitguard.util import Point, RotationData

ALWAYS = SimpleNamespace(randrange=lambda n: 0)
NEVER = SimpleNamespace(randrange=lambda n: n - 1)
MINE_PICTURE = (20, 20)


def sized(width, height):
    return Texture.from_surface(pygame.Surface((width, height)))


def make_orbit(rng=ALWAYS, mines=False):
    orbit = Orbit([sized(100, 50), sized(100, 60)], rng=rng)
    if mines:
        orbit.set_mines_texture(sized(*MINE_PICTURE))
    return orbit


def live_orbit(angle=0.0, **kwargs):
    orbit = make_orbit(**kwargs)
    orbit.reinit(400, RotationData(angle))
    return orbit


def live_enemy(angle, y_pos, height=64):
    enemy = Enemy(rng=ALWAYS)
    enemy.set_texture(sized(64, height))
    enemy.angle = angle
    enemy.move(0.0)
    enemy.y_pos = y_pos
    return enemy


def test_inactive_probe_ignores_motion_and_speed():
    orbit = make_orbit()
    assert orbit.is_alive() is False
    orbit.move(1.0)
    orbit.change_speed(100)
    assert orbit.rotation.angle == 0.0
    assert orbit.speed == 20.0


def test_reinit_copies_rotation_and_restores_lives():
    orbit = make_orbit()
    source = RotationData(45.0, Point(3, 4))
    orbit.reinit(400, source)
    source.angle = 90.0
    source.center.y = 99
    assert orbit.is_alive() is True
    assert orbit.y_pos == 400
    assert orbit.rotation.angle == 45.0
    assert orbit.rotation.center == Point(3, 4)
    assert orbit.curr_lifes == orbit.max_lifes


def test_move_turns_counter_clockwise():
    orbit = live_orbit()
    orbit.move(0.5)
    assert orbit.rotation.angle == -10.0


def test_change_speed_switches_picture():
    orbit = live_orbit()
    orbit.change_speed(100)
    assert (orbit.speed, orbit.image) == (120.0, Orbit.IMAGE_MOVE)
    orbit.change_speed(-100)
    assert (orbit.speed, orbit.image) == (20.0, Orbit.IMAGE_DEFAULT)


def test_collision_destroys_enemy_and_costs_life():
    orbit = live_orbit(30.0)
    hit, missed = live_enemy(30.0, 393), live_enemy(90.0, 393)
    orbit.detect_collision([hit, missed])
    assert hit.is_alive() is False
    assert missed.is_alive() is True
    assert orbit.curr_lifes == orbit.max_lifes - 1
    assert orbit.is_alive() is True


def test_negative_angle_is_normalised_for_collision():
    orbit = live_orbit(-330.0)
    enemy = live_enemy(30.0, 393)
    orbit.detect_collision([enemy])
    assert enemy.is_alive() is False


def test_probe_dies_after_losing_all_lives():
    orbit = live_orbit(30.0)
    orbit.detect_collision([live_enemy(30.0, 393) for _ in range(orbit.max_lifes)])
    assert orbit.curr_lifes == 0
    assert orbit.is_alive() is False


def test_drops_at_most_all_mines():
    orbit = live_orbit(60.0, mines=True)
    for _ in range(Orbit.NUM_MINES + 2):
        orbit.calc_drop_mine()
    assert sum(mine.is_alive() for mine in orbit.mines) == Orbit.NUM_MINES
    assert orbit.mines_thrown == Orbit.NUM_MINES
    assert {mine.y_pos for mine in orbit.mines} == {orbit.y_pos}
    assert {mine.rotation.angle for mine in orbit.mines} == {60.0}


def test_no_drop_when_chance_fails_or_dead():
    unlucky = live_orbit(rng=NEVER, mines=True)
    unlucky.calc_drop_mine()
    dead = make_orbit(mines=True)
    dead.calc_drop_mine()
    assert not any(mine.is_alive() for mine in unlucky.mines + dead.mines)


def test_mines_destroy_enemies():
    orbit = live_orbit(30.0, mines=True)
    orbit.calc_drop_mine()
    enemy = live_enemy(30.0, 378)
    orbit.process_mines_collision([enemy])
    assert enemy.is_alive() is False
    assert not any(mine.is_alive() for mine in orbit.mines)