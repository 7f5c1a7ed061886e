"""The screen shown after a lost level, offering a retry."""

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

_SHIFT_BUTTON_UPPER = 140
_SHIFT_BETWEEN_BUTTONS = 60
_SHIFT_CENTER = 100
_OFFSET = 70
_LAST_BUTTON = 1

_RETRY_TARGETS = {GameState.LVL1_LOSE: GameState.LVL1, GameState.LVL2_LOSE: GameState.LVL2}


def _highlight(rp, buttons, active_button: int, prev_button: int) -> None:
    try:
        button, text = buttons[active_button]
    except KeyError:
        raise ValueError(f"there is no such button id: {active_button}") from None
    button.update_text(rp, text, COLOR_MAIN_ACT, COLOR_SHADOW_ACT)
    if prev_button == -1:
        return
    try:
        button, text = buttons[prev_button]
    except KeyError:
        raise ValueError(f"there is no such button id: {prev_button}") from None
    button.update_text(rp, text, COLOR_MAIN_PASS, COLOR_SHADOW_PASS)


def lose_page(rp, ui: UI, curr_lvl: GameState) -> GameState:
    """Show the lose screen; a retry restarts the level ``curr_lvl`` was lost in."""
    if curr_lvl not in _RETRY_TARGETS:
        raise ValueError(f"there is no such id for lose page: {curr_lvl}")
    rp.clear()
    ui.reset_image_background(Background.MENU_BACK)

    lose_text = TextBox(rp, "YOU LOSE...", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, True, 2)
    lose_text.set_position(
        (SCREEN_WIDTH - lose_text.width) // 2,
        (SCREEN_HEIGHT - lose_text.height) // 2 - _OFFSET - _SHIFT_CENTER,
    )
    try_text = TextBox(rp, "TRY AGAIN!", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, True, 2)
    try_text.set_position(
        (SCREEN_WIDTH - try_text.width) // 2,
        (SCREEN_HEIGHT - try_text.height) // 2 - _SHIFT_CENTER,
    )
    retry_button = TextBox(rp, "RETRY", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, False, 1)
    retry_button.set_position(
        (SCREEN_WIDTH - retry_button.width) // 2,
        (SCREEN_HEIGHT - retry_button.height) // 2 + _SHIFT_BUTTON_UPPER,
    )
    quit_button = TextBox(rp, "QUIT", COLOR_MAIN_PASS, COLOR_SHADOW_PASS, 4, False, 1)
    quit_button.set_position(
        (SCREEN_WIDTH - quit_button.width) // 2,
        (SCREEN_HEIGHT - quit_button.height) // 2 + _SHIFT_BUTTON_UPPER + _SHIFT_BETWEEN_BUTTONS,
    )
    buttons = {0: (retry_button, "RETRY"), 1: (quit_button, "QUIT")}

    prev_button = -1
    active_button = -1
    state = GameState.WIN
    cap_timer = Timer()

    while state == GameState.WIN:
        cap_timer.start()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                state = GameState.QUIT
            else:
                state, active_button = process_lose_key(event, state, active_button)
        rp.clear()
        ui.render_background(rp)
        if prev_button != active_button:
            _highlight(rp, buttons, active_button, prev_button)
            prev_button = active_button
        lose_text.render(rp)
        try_text.render(rp)
        retry_button.render(rp)
        quit_button.render(rp)
        rp.present()
        frame_ticks = cap_timer.ticks()
        if frame_ticks < SCREEN_TICK_PER_FRAME:
            pygame.time.delay(SCREEN_TICK_PER_FRAME - frame_ticks)

    if state == GameState.RETRY:
        return _RETRY_TARGETS[curr_lvl]
    return state


def process_lose_key(event, state: GameState, active_button: int) -> tuple[GameState, int]:
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
            state = get_state_lose(active_button)
    return state, active_button


def get_state_lose(active_button: int) -> GameState:
    """The state that pressing button ``active_button`` leads to."""
    if active_button == 0:
        return GameState.RETRY
    if active_button == 1:
        return GameState.MENU
    logger.warning("there is no such button id: %s", active_button)
    return GameState.QUIT