"""Dispatch from the current game state to the screen that handles it."""

from __future__ import annotations

import logging

from .constants import GameState
from .game_levels import process_gameplay1, process_gameplay2
from .help import process_help
from .level_menu import level_menu
from .lose_page import lose_page
from .menu import process_menu
from .win_page import win_page

logger = logging.getLogger(__name__)


def game_function(state: GameState, rp, ui) -> GameState:
    """Run the screen for ``state`` and return the state it leads to."""
    if state == GameState.PLAY_MENU:
        return level_menu(rp, ui)
    if state == GameState.HELP:
        return process_help(rp, ui)
    if state == GameState.MENU:
        return process_menu(rp, ui)
    if state == GameState.WIN:
        return win_page(rp, ui)
    if state in (GameState.LVL1_LOSE, GameState.LVL2_LOSE):
        return lose_page(rp, ui, state)
    if state == GameState.LVL1:
        return process_gameplay1(rp, ui)
    if state == GameState.LVL2:
        return process_gameplay2(rp, ui)
    logger.warning("there is no such game state as: %s", state)
    return state