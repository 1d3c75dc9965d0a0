"""Shared fixtures: a recording host console and a controllable clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, List, Tuple

import pytest


@dataclass
class RecordingConsole:
    calls: List[Tuple[str, Tuple[Any, ...]]] = field(default_factory=list)

    def _record(self, channel: str, args: Tuple[Any, ...]) -> None:
        self.calls.append((channel, args))

    def log(self, *args: Any) -> None:
        self._record("log", args)

    def warn(self, *args: Any) -> None:
        self._record("warn", args)

    def error(self, *args: Any) -> None:
        self._record("error", args)

    def info(self, *args: Any) -> None:
        self._record("info", args)

    def debug(self, *args: Any) -> None:
        self._record("debug", args)

    @property
    def last(self) -> Tuple[str, Tuple[Any, ...]]:
        assert self.calls, "console was never called"
        return self.calls[-1]


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 9, 7, 5, 3, 42000, tzinfo=timezone.utc))
