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
from orbitguard.menu import change_active_button_menu, get_menu_state, process_menu_key


class _Button:
    def __init__(self):
        self.calls = []

    def update_text(self, rp, text, front, shadow):
        self.calls.append((text, front, shadow))


def _down(key, repeat=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, repeat=repeat)


def test_first_keydown_activates_play():
    state, active = process_menu_key(_down(pygame.K_UP), GameState.MENU, -1)
    assert (state, active) == (GameState.MENU, 0)


def test_navigation_clamps_both_ends():
    state, active = GameState.MENU, 0
    for _ in range(4):
        state, active = process_menu_key(_down(pygame.K_DOWN), state, active)
    assert active == 2
    for _ in range(4):
        state, active = process_menu_key(_down(pygame.K_w), state, active)
    assert active == 0
    assert state == GameState.MENU


@pytest.mark.parametrize(
    "button, expected",
    [(0, GameState.PLAY_MENU), (1, GameState.HELP), (2, GameState.QUIT)],
)
def test_return_chooses_state(button, expected):
    state, _ = process_menu_key(_down(pygame.K_RETURN), GameState.MENU, button)
    assert state == expected


def test_other_events_change_nothing():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
    assert process_menu_key(event, GameState.MENU, 1) == (GameState.MENU, 1)


def test_unknown_button_quits(caplog):
    with caplog.at_level(logging.WARNING):
        assert get_menu_state(4) == GameState.QUIT
    assert "4" in caplog.text


def test_highlight_help_dims_play():
    play, help_button, quit_button = _Button(), _Button(), _Button()
    change_active_button_menu(None, 1, 0, play, help_button, quit_button)
    assert help_button.calls == [("HELP", COLOR_MAIN_ACT, COLOR_SHADOW_ACT)]
    assert play.calls == [("PLAY", COLOR_MAIN_PASS, COLOR_SHADOW_PASS)]


def test_highlight_quit_then_dim_itself_from_start():
    play, help_button, quit_button = _Button(), _Button(), _Button()
    change_active_button_menu(None, 2, -1, play, help_button, quit_button)
    assert quit_button.calls == [
        ("QUIT", COLOR_MAIN_ACT, COLOR_SHADOW_ACT),
        ("QUIT", COLOR_MAIN_PASS, COLOR_SHADOW_PASS),
    ]
    assert play.calls == []


def test_invalid_buttons_raise():
    with pytest.raises(ValueError):
        change_active_button_menu(None, 3, 0, None, None, None)
    play, help_button, quit_button = _Button(), _Button(), _Button()
    with pytest.raises(ValueError):
        change_active_button_menu(None, 1, 8, play, help_button, quit_button)