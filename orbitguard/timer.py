"""A millisecond stopwatch that can be paused."""

from __future__ import annotations

import time
from collections.abc import Callable


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Counts milliseconds from ``start``; pausing freezes the count."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock if clock is not None else _monotonic_ms
        self._start_ticks = 0
        self._paused_ticks = 0
        self._paused = False
        self._started = False

    def start(self) -> None:
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._paused_ticks = 0

    def stop(self) -> None:
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self._clock() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._paused_ticks
            self._paused_ticks = 0

    def ticks(self) -> int:
        """Milliseconds counted so far; 0 when stopped."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self._clock() - self._start_ticks

    def is_started(self) -> bool:
        return self._started

    def is_paused(self) -> bool:
        return self._paused and self._started