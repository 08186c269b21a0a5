"""Monotonic stopwatch with selectable units."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable


class Resolution(Enum):
    """Units for timer readings, given as seconds per unit."""

    SECONDS = 1.0
    MILLISECONDS = 1.0 / 1000
    MICROSECONDS = 1.0 / 10_000_000
    NANOSECONDS = 1.0 / 100_000_000_000


class Timer:
    """Measures elapsed time between start and stop, and between ticks."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        now = clock()
        self._start_time = now
        self._previous_tick = now
        self._running = False

    def start(self) -> None:
        """Start the timer; does nothing if it is already running."""
        if not self._running:
            self._running = True
            self._start_time = self._clock()

    def stop(self, resolution: Resolution = Resolution.SECONDS) -> float:
        """Stop the timer and return the time since start, or 0 if not running."""
        if not self._running:
            return 0.0
        self._running = False
        now = self._clock()
        duration = (now - self._start_time) / resolution.value
        self._start_time = now
        return duration

    def elapsed(self, resolution: Resolution = Resolution.SECONDS) -> float:
        """Return the time since start, or 0 if not running."""
        if not self._running:
            return 0.0
        return (self._clock() - self._start_time) / resolution.value

    def tick(self, resolution: Resolution = Resolution.SECONDS) -> float:
        """Return the time since the previous tick (or creation) and reset it."""
        now = self._clock()
        duration = (now - self._previous_tick) / resolution.value
        self._previous_tick = now
        return duration

    @property
    def is_running(self) -> bool:
        """Whether the timer has been started and not stopped."""
        return self._running