import logging

import pygame
import pytest

from orbitguard.constants import (
    COLOR_MAIN_ACT,
    COLOR_MAIN_PASS,
    COLOR_SHADOW_ACT,
    COLOR_SHADOW_PASS,
    GameState,
)
from orbitguard.level_menu import (
    change_active_button_level_menu,
    get_state_level_menu,
    process_level_menu_key,
)


class _Button:
    def __init__(self):
        self.calls = []

    def update_text(self, rp, text, front, shadow):
        self.calls.append((text, front, shadow))


def _down(key, repeat=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, repeat=repeat)


def _up(key):
    return pygame.event.Event(pygame.KEYUP, key=key, repeat=0)


def test_first_keydown_activates_first_button():
    state, active = process_level_menu_key(_down(pygame.K_RETURN), GameState.PLAY_MENU, -1)
    assert (state, active) == (GameState.PLAY_MENU, 0)


def test_keyup_does_not_activate():
    state, active = process_level_menu_key(_up(pygame.K_s), GameState.PLAY_MENU, -1)
    assert active == -1
    assert state == GameState.PLAY_MENU


def test_down_moves_and_clamps_at_last():
    state = GameState.PLAY_MENU
    active = 0
    for _ in range(5):
        state, active = process_level_menu_key(_down(pygame.K_DOWN), state, active)
    assert active == 2
    assert state == GameState.PLAY_MENU


def test_up_clamps_at_first():
    _, active = process_level_menu_key(_down(pygame.K_w), GameState.PLAY_MENU, 2)
    assert active == 1
    _, active = process_level_menu_key(_down(pygame.K_UP), GameState.PLAY_MENU, 0)
    assert active == 0


def test_repeated_key_is_ignored():
    _, active = process_level_menu_key(_down(pygame.K_s, repeat=1), GameState.PLAY_MENU, 0)
    assert active == 0


@pytest.mark.parametrize(
    "button, expected",
    [(0, GameState.LVL1), (1, GameState.LVL2), (2, GameState.MENU)],
)
def test_return_chooses_state(button, expected):
    state, active = process_level_menu_key(_down(pygame.K_RETURN), GameState.PLAY_MENU, button)
    assert state == expected
    assert active == button


def test_unknown_button_quits_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        assert get_state_level_menu(7) == GameState.QUIT
    assert "7" in caplog.text


def test_highlight_moves_between_levels():
    lvl1, lvl2, quit_button = _Button(), _Button(), _Button()
    change_active_button_level_menu(None, 1, 0, lvl1, lvl2, quit_button)
    assert lvl2.calls == [("LEVEL 2", COLOR_MAIN_ACT, COLOR_SHADOW_ACT)]
    assert lvl1.calls == [("LEVEL 1", COLOR_MAIN_PASS, COLOR_SHADOW_PASS)]
    assert quit_button.calls == []


def test_first_highlight_dims_quit():
    lvl1, lvl2, quit_button = _Button(), _Button(), _Button()
    change_active_button_level_menu(None, 0, -1, lvl1, lvl2, quit_button)
    assert lvl1.calls == [("LEVEL 1", COLOR_MAIN_ACT, COLOR_SHADOW_ACT)]
    assert quit_button.calls == [("QUIT", COLOR_MAIN_PASS, COLOR_SHADOW_PASS)]


def test_invalid_active_button_raises():
    with pytest.raises(ValueError):
        change_active_button_level_menu(None, 5, -1, None, None, None)


def test_invalid_previous_button_raises():
    lvl1, lvl2, quit_button = _Button(), _Button(), _Button()
    with pytest.raises(ValueError):
        change_active_button_level_menu(None, 0, 9, lvl1, lvl2, quit_button)
    assert len(lvl1.calls) == 1