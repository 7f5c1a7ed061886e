"""The planet the player defends."""

from dataclasses import dataclass


@dataclass
class Planet:
    """Tracks the planet's remaining lives."""

    curr_lifes: int = 4
    max_lifes: int = 4

    def inc_lifes(self) -> None:
        self.curr_lifes += 1

    def dec_lifes(self) -> None:
        self.curr_lifes -= 1