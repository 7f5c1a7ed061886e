"""The main menu: play, help or quit."""

from __future__ import annotations

import logging

import pygame

from .constants import (
    COLOR_MAIN_ACT,
    COLOR_MAIN_PASS,
    COLOR_SHADOW_ACT,
    COLOR_SHADOW_PASS,
    SCREEN_HEIGHT,
    SCREEN_TICK_PER_FRAME,
    SCREEN_WIDTH,
    GameState,
)
from .text_box import TextBox
from .timer import Timer
from .ui import UI, Background

logger = logging.getLogger(__name__)

_OFFSET = 70
_LAST_BUTTON = 2


def process_menu(rp, ui: UI) -> GameState:
    """Show the main menu until a choice is made or the window is closed."""
    rp.clear()
    ui.reset_image_background(Background.MENU_BACK)

    play_button = TextBox(rp, "PLAY", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, False, 1)
    play_button.set_position(
        (SCREEN_WIDTH - play_button.width) // 2,
        (SCREEN_HEIGHT - play_button.height) // 2 - _OFFSET,
    )
    help_button = TextBox(rp, "HELP", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, False, 1)
    help_button.set_position(
        (SCREEN_WIDTH - help_button.width) // 2, (SCREEN_HEIGHT - help_button.height) // 2
    )
    quit_button = TextBox(rp, "QUIT", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, False, 1)
    quit_button.set_position(
        (SCREEN_WIDTH - quit_button.width) // 2,
        (SCREEN_HEIGHT - quit_button.height) // 2 + _OFFSET,
    )

    state = GameState.MENU
    prev_button = -1
    active_button = -1
    cap_timer = Timer()

    while state == GameState.MENU:
        cap_timer.start()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                state = GameState.QUIT
            else:
                state, active_button = process_menu_key(event, state, active_button)
        rp.clear()
        ui.render_background(rp)
        if prev_button != active_button:
            change_active_button_menu(
                rp, active_button, prev_button, play_button, help_button, quit_button
            )
            prev_button = active_button
        play_button.render(rp)
        help_button.render(rp)
        quit_button.render(rp)
        rp.present()
        frame_ticks = cap_timer.ticks()
        if frame_ticks < SCREEN_TICK_PER_FRAME:
            pygame.time.delay(SCREEN_TICK_PER_FRAME - frame_ticks)
    return state


def process_menu_key(event, state: GameState, active_button: int) -> tuple[GameState, int]:
    """Handle one event; returns the new state and the new active button."""
    if active_button == -1 and event.type == pygame.KEYDOWN:
        return state, 0
    if event.type == pygame.KEYDOWN and not getattr(event, "repeat", 0):
        key = event.key
        if key in (pygame.K_w, pygame.K_UP):
            active_button = 0 if active_button == 0 else active_button - 1
        elif key in (pygame.K_s, pygame.K_DOWN):
            active_button = _LAST_BUTTON if active_button == _LAST_BUTTON else active_button + 1
        elif key == pygame.K_RETURN:
            state = get_menu_state(active_button)
    return state, active_button


def get_menu_state(active_button: int) -> GameState:
    """The state that pressing button ``active_button`` leads to."""
    states = {0: GameState.PLAY_MENU, 1: GameState.HELP, 2: GameState.QUIT}
    if active_button in states:
        return states[active_button]
    logger.warning("there is no such button id: %s", active_button)
    return GameState.QUIT


def change_active_button_menu(
    rp, active_button, prev_button, play_button, help_button, quit_button
) -> None:
    """Highlight the active button and dim the one highlighted before."""
    active = {0: (play_button, "PLAY"), 1: (help_button, "HELP"), 2: (quit_button, "QUIT")}
    try:
        button, text = active[active_button]
    except KeyError:
        raise ValueError(f"there is no such button id: {active_button}") from None
    button.update_text(rp, text, COLOR_MAIN_ACT, COLOR_SHADOW_ACT)

    passive = {
        0: (play_button, "PLAY"),
        1: (help_button, "HELP"),
        -1: (quit_button, "QUIT"),
        2: (quit_button, "QUIT"),
    }
    try:
        button, text = passive[prev_button]
    except KeyError:
        raise ValueError(f"there is no such button id: {prev_button}") from None
    button.update_text(rp, text, COLOR_MAIN_PASS, COLOR_SHADOW_PASS)