"""Arcade game: defend a planet from meteors with a ship that circles it."""

__version__ = "0.1.0"