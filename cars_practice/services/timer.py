"""Elapsed-time tracker owned by a single in-progress session view."""
import time
from typing import Callable


class SessionTimer:
    """Start/pause/reset stopwatch; `elapsed` is read synchronously in whole seconds.

    Starting a running timer or pausing a paused one does nothing.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._accumulated = 0.0
        self._started_at: float | None = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> int:
        total = self._accumulated
        if self._started_at is not None:
            total += self._clock() - self._started_at
        return int(total)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def pause(self) -> None:
        if self._started_at is not None:
            self._accumulated += self._clock() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None
