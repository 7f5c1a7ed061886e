"""The two playable levels and the keyboard handling shared by them."""

from __future__ import annotations

import math
import time

import pygame

from .constants import (
    DEGREES_IN_HALF_CIRCLE,
    KILLS_TO_WIN,
    MOVE_ANGULAR,
    MOVE_LEN,
    NUM_ENEMY_ON_MAP,
    NUM_OBJ_HEALTH_ON_MAP,
    SCREEN_TICK_PER_FRAME,
    GameState,
)
from .enemy import Enemy
from .health_module import HealthModule
from .obj_health import ObjHealth
from .obj_orbit import ObjOrbit
from .orbit import Orbit
from .planet import Planet
from .ship import Ship, ShipImage
from .timer import Timer
from .ui import UI, Background, EnemyImage, UIImage
from .ui_killbar import KillBar
from .util import eu_mod

_ORBIT_BOOST = 100
_ENEMY_ANGLE_STEP = 15
_SNAP_CLOCKWISE_FROM = 9
_SNAP_COUNTER_CLOCKWISE_FROM = 5


def _wait_for_frame(cap_timer: Timer) -> None:
    frame_ticks = cap_timer.ticks()
    if frame_ticks < SCREEN_TICK_PER_FRAME:
        pygame.time.delay(SCREEN_TICK_PER_FRAME - frame_ticks)


def _play_level(rp, ui: UI, ship_type: int, background: Background, lose_state: GameState) -> GameState:
    rp.clear()
    ui.reset_image_background(background)
    ship = Ship.load(rp, ship_type)
    orbit = Orbit.load(rp)
    orbit.set_mines_texture(ui.mine_texture)
    hp_module = HealthModule.load(rp)
    planet = Planet()
    heart_texture = ui.ui_texture(UIImage.RED_HEART)
    hearts = [ObjHealth(heart_texture) for _ in range(NUM_OBJ_HEALTH_ON_MAP)]
    obj_orbit = ObjOrbit(ui.ui_texture(UIImage.ORBIT_ELEMENT))
    kill_bar = KillBar(rp)

    meteors = []
    for i in range(NUM_ENEMY_ON_MAP):
        meteor = Enemy()
        meteor.angle = float(i * _ENEMY_ANGLE_STEP)
        meteor.set_texture(ui.enemy_texture(EnemyImage.METEOR))
        meteors.append(meteor)

    quit_requested = False
    cap_timer = Timer()
    last_frame_time = time.monotonic()

    while not quit_requested and game_is_running(ship, planet):
        cap_timer.start()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            process_key(event, ship, meteors, orbit)

        now = time.monotonic()
        delta_time = now - last_frame_time
        last_frame_time = now

        ship.move(delta_time)
        orbit.move(delta_time)

        rp.clear()
        ui.render_background(rp)
        ui.render_planet_health(rp, planet)
        ui.render_ship_health(rp, ship)
        ui.render_ship_bullets(rp, ship)
        for heart in hearts:
            heart.render(rp)
        orbit.render_mines(rp)
        obj_orbit.render(rp)
        if hp_module.render(rp, delta_time, hearts):
            add_life(planet, ship)
        orbit.render(rp)
        ship.render(rp)
        for meteor in meteors:
            if meteor.detect_planet_collision(planet):
                planet.dec_lifes()
            if meteor.move(delta_time):
                meteor.render(rp)
        kill_bar.render(rp, ship)
        rp.present()

        ship.detect_collision(meteors)
        orbit.detect_collision(meteors)
        orbit.process_mines_collision(meteors)
        orbit.calc_drop_mine()
        ship.calc_cooldown()
        obj_orbit.calc_spawn(ship, orbit)
        if obj_orbit.detect_collision(ship):
            orbit.reinit(obj_orbit.y_pos, obj_orbit.rotation)
        for heart in hearts:
            heart.calc_spawn()
            if heart.detect_collision(ship):
                add_life(planet, ship)
        hp_module.calc_spawn(ship, planet, hearts)

        _wait_for_frame(cap_timer)

    if ship.kills >= KILLS_TO_WIN:
        return GameState.WIN
    return lose_state


def process_gameplay1(rp, ui: UI) -> GameState:
    """Play level 1; returns WIN or LVL1_LOSE."""
    return _play_level(rp, ui, 0, Background.GAME_BACK1, GameState.LVL1_LOSE)


def process_gameplay2(rp, ui: UI) -> GameState:
    """Play level 2; returns WIN or LVL2_LOSE."""
    return _play_level(rp, ui, 1, Background.GAME_BACK2, GameState.LVL2_LOSE)


def _keep_reload(ship: Ship) -> ShipImage:
    return ShipImage.RELOAD if ship.image == ShipImage.RELOAD else ShipImage.DEFAULT


def _update_animation(event, ship: Ship, repeat: int) -> None:
    if event.type == pygame.KEYDOWN:
        key = event.key
        if key == pygame.K_w:
            ship.image = ShipImage.MOVE_FORWARD
        elif key == pygame.K_s:
            ship.image = ShipImage.MOVE_BACKWARD
        elif key == pygame.K_SPACE:
            ship.change_shoot_animation()
        elif key in (pygame.K_a, pygame.K_d):
            ship.image = _keep_reload(ship)
        else:
            ship.image = ShipImage.DEFAULT
    elif event.type == pygame.KEYUP and not repeat:
        if event.key == pygame.K_SPACE:
            ship.image = _keep_reload(ship)


def process_key(event, ship: Ship, enemies, orbit: Orbit) -> None:
    """Apply one input event to the ship's animation, motion and guns, and to the probe."""
    repeat = getattr(event, "repeat", 0)
    _update_animation(event, ship, repeat)
    step_angular = int(MOVE_ANGULAR)

    if event.type == pygame.KEYDOWN and not repeat:
        key = event.key
        if key == pygame.K_w:
            ship.vel_r -= MOVE_LEN
            ship.moving_r = True
        elif key == pygame.K_s:
            ship.vel_r += MOVE_LEN
            ship.moving_r = True
        elif key == pygame.K_a:
            ship.vel_ang -= step_angular
            ship.moving_ang = True
        elif key == pygame.K_d:
            ship.vel_ang += step_angular
            ship.moving_ang = True
        elif key == pygame.K_e:
            ship.angle += DEGREES_IN_HALF_CIRCLE
        elif key == pygame.K_SPACE:
            ship.process_shooting(enemies)
        elif key == pygame.K_m:
            orbit.change_speed(_ORBIT_BOOST)
    elif event.type == pygame.KEYUP and not repeat:
        ship.angle = float(math.floor(ship.angle))
        rem = eu_mod(int(ship.angle), step_angular)
        key = event.key
        if key == pygame.K_w:
            ship.vel_r += MOVE_LEN
            ship.moving_r = False
        elif key == pygame.K_s:
            ship.vel_r -= MOVE_LEN
            ship.moving_r = False
        elif key == pygame.K_a:
            ship.vel_ang += step_angular
            if rem > _SNAP_CLOCKWISE_FROM:
                ship.angle += step_angular - rem
            else:
                ship.angle -= rem
            ship.moving_ang = False
        elif key == pygame.K_d:
            ship.vel_ang -= step_angular
            if rem > _SNAP_COUNTER_CLOCKWISE_FROM:
                ship.angle += step_angular - rem
            else:
                ship.angle -= rem
            ship.moving_ang = False
        elif key == pygame.K_m:
            orbit.change_speed(-_ORBIT_BOOST)


def add_life(planet: Planet, ship: Ship) -> None:
    """Give a life to the planet if it lacks one, otherwise to the ship."""
    if planet.curr_lifes < planet.max_lifes:
        planet.inc_lifes()
    elif ship.curr_lifes < ship.max_lifes:
        ship.curr_lifes += 1


def game_is_running(ship: Ship, planet: Planet) -> bool:
    """True while the ship fights on and the planet has lives."""
    return ship.is_fighting() and planet.curr_lifes != 0