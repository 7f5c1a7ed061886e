"""The screen shown after a won level."""

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


def _highlight(rp, quit_button: TextBox, active_button: int, prev_button: int) -> None:
    if active_button == 0:
        quit_button.update_text(rp, "QUIT", COLOR_MAIN_ACT, COLOR_SHADOW_ACT)
    else:
        raise ValueError(f"there is no such button id: {active_button}")
    if prev_button == -1:
        return
    if prev_button == 0:
        quit_button.update_text(rp, "QUIT", COLOR_MAIN_PASS, COLOR_SHADOW_PASS)
    else:
        raise ValueError(f"there is no such button id: {prev_button}")


def win_page(rp, ui: UI) -> GameState:
    """Congratulate the player until they leave the screen."""
    rp.clear()
    ui.reset_image_background(Background.MENU_BACK)

    win_text = TextBox(rp, "YOU WON!", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, True, 2)
    win_text.set_position(
        (SCREEN_WIDTH - win_text.width) // 2,
        (SCREEN_HEIGHT - win_text.height) // 2 - _OFFSET,
    )
    congr_text = TextBox(rp, "CONGRATULATIONS!", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, True, 2)
    congr_text.set_position(
        (SCREEN_WIDTH - congr_text.width) // 2, (SCREEN_HEIGHT - congr_text.height) // 2
    )
    quit_button = TextBox(rp, "QUIT", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, False, 1)
    quit_button.set_position(
        (SCREEN_WIDTH - quit_button.width) // 2,
        (SCREEN_HEIGHT - quit_button.height) // 2 + _OFFSET,
    )

    state = GameState.WIN
    prev_button = -1
    active_button = -1
    cap_timer = Timer()

    while state == GameState.WIN:
        cap_timer.start()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                state = GameState.QUIT
            else:
                state, active_button = process_win_key(event, state, active_button)
        rp.clear()
        ui.render_background(rp)
        if prev_button != active_button:
            _highlight(rp, quit_button, active_button, prev_button)
            prev_button = active_button
        win_text.render(rp)
        congr_text.render(rp)
        quit_button.render(rp)
        rp.present()
        frame_ticks = cap_timer.ticks()
        if frame_ticks < SCREEN_TICK_PER_FRAME:
            pygame.time.delay(SCREEN_TICK_PER_FRAME - frame_ticks)
    return state


def process_win_key(event, state: GameState, active_button: int) -> tuple[GameState, int]:
    """Handle one event; returns the new state and the new active button."""
    if active_button == -1 and event.type == pygame.KEYDOWN:
        return state, 0
    if event.type == pygame.KEYDOWN and not getattr(event, "repeat", 0):
        key = event.key
        if key in (pygame.K_w, pygame.K_UP):
            active_button = 0 if active_button == 0 else active_button - 1
        elif key in (pygame.K_s, pygame.K_DOWN):
            active_button = 0 if active_button == 0 else active_button + 1
        elif key == pygame.K_RETURN:
            state = get_state_win(active_button)
    return state, active_button


def get_state_win(active_button: int) -> GameState:
    """The state that pressing button ``active_button`` leads to."""
    if active_button == 0:
        return GameState.MENU
    logger.warning("there is no such button id: %s", active_button)
    return GameState.QUIT