"""Command-line entry point: open the window and run the screens until quit."""

from __future__ import annotations

import argparse
import sys

from .constants import GameState
from .game_process import game_function
from .render_pipe import RenderPipe, RenderPipeError
from .texture import TextureError
from .ui import UI


def main(argv=None) -> int:
    """Run the game; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="orbitguard", description="Defend the planet from falling meteors."
    )
    parser.parse_args(argv)

    rp = RenderPipe()
    try:
        rp.open()
    except RenderPipeError as exc:
        print(f"Failed to init! {exc}", file=sys.stderr)
        return 1
    try:
        try:
            ui = UI.load(rp)
        except TextureError as exc:
            print(f"Failed to load textures! {exc}", file=sys.stderr)
            return 1
        state = GameState.MENU
        while state != GameState.QUIT:
            state = game_function(state, rp, ui)
    finally:
        rp.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())