from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from .errors import StopwatchNotStartedError


class Stopwatch:
    """Start time of the most recent ``start()``; ``stop()`` reads it as a lap."""

    __slots__ = ("_clock", "started_at")

    def __init__(self, clock: Callable[[], datetime]) -> None:
        self._clock = clock
        self.started_at: Optional[datetime] = None

    def start(self) -> datetime:
        self.started_at = self._clock()
        return self.started_at

    def elapsed_ms(self) -> int:
        if self.started_at is None:
            raise StopwatchNotStartedError()
        delta = self._clock() - self.started_at
        return max(0, int(delta.total_seconds() * 1000))
