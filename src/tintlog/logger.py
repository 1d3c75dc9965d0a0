"""Color-coded console logger for terminals and browser consoles."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from .config import Environment, Settings
from .console import HostConsole, resolve_console
from .emitter import emit
from .errors import StopwatchNotStartedError
from .formatter import LogEvent, format_event, format_timestamp, local_now
from .palette import TYPE_LABELS, RenderTarget, Severity
from .serialize import join_message
from .stopwatch import Stopwatch


def _raw(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


class Logger:
    """Logger bound to one label.

    ``target``, ``timestamps`` and ``console`` are normally taken from the
    ``TINTLOG_*`` settings and the environment probe; pass them explicitly
    to pin the rendering.
    """

    __slots__ = ("_label", "_target", "_timestamps", "_console", "_clock", "_stopwatch")

    def __init__(
        self,
        label: str,
        *,
        target: Union[RenderTarget, str, None] = None,
        timestamps: Optional[bool] = None,
        console: Optional[HostConsole] = None,
        clock: Optional[Callable[[], datetime]] = None,
        environment: Optional[Environment] = None,
    ) -> None:
        if target is None or timestamps is None:
            environment = environment or Settings.from_environ(os.environ).environment()
        resolved = RenderTarget(target) if target is not None else environment.target
        if timestamps is None:
            timestamps = not environment.suppress_timestamps
        clock = clock or local_now
        object.__setattr__(self, "_label", str(label))
        object.__setattr__(self, "_target", resolved)
        object.__setattr__(self, "_timestamps", bool(timestamps))
        object.__setattr__(self, "_console", console or resolve_console(resolved))
        object.__setattr__(self, "_clock", clock)
        object.__setattr__(self, "_stopwatch", Stopwatch(clock))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Logger attributes are read-only: {name}")

    def __repr__(self) -> str:
        return f"Logger(label={self._label!r}, target={self._target.value!r})"

    @property
    def label(self) -> str:
        return self._label

    @property
    def target(self) -> RenderTarget:
        return self._target

    @property
    def timestamps(self) -> bool:
        return self._timestamps

    @property
    def started_at(self) -> Optional[datetime]:
        return self._stopwatch.started_at

    def _write(self, args: tuple, kind: str, category: Severity, channel: str) -> None:
        type_label = TYPE_LABELS[kind]
        try:
            event = format_event(
                join_message(args),
                type_label,
                category,
                label=self._label,
                target=self._target,
                include_timestamp=self._timestamps,
                now=self._clock() if self._timestamps else None,
            )
        except Exception:
            message = "".join(_raw(arg) for arg in args)
            event = LogEvent(text=(type_label, f"[{self._label}]:", message))
        try:
            emit(event, self._target, channel, self._console)
        except Exception:
            # closed pipe or detached stream
            return

    def debug(self, *message: Any) -> None:
        self._write(message, "debug", Severity.DEBUG, "debug")

    def warn(self, *message: Any) -> None:
        self._write(message, "warning", Severity.WARNING, "warn")

    warning = warn

    def log(self, *message: Any) -> None:
        self._write(message, "log", Severity.NORMAL, "log")

    def info(self, *message: Any) -> None:
        self._write(message, "info", Severity.INFO, "info")

    def error(self, *message: Any) -> None:
        self._write(message, "error", Severity.ERROR, "error")

    def success(self, *message: Any) -> None:
        self._write(message, "success", Severity.SUCCESS, "log")

    def start(self) -> None:
        started = self._stopwatch.start()
        self._write(("Start timer ", format_timestamp(started)), "time", Severity.TIME, "log")

    def stop(self) -> Optional[int]:
        """Report and return milliseconds since the last ``start()``.

        The start time is kept, so repeated calls report laps from the same
        origin. Without a prior ``start()`` an error line is written instead
        and None is returned.
        """
        try:
            elapsed = self._stopwatch.elapsed_ms()
        except StopwatchNotStartedError:
            self._write(("Duration unavailable: timer not started",), "time", Severity.TIME, "error")
            return None
        self._write((f"Duration +{elapsed}ms",), "time", Severity.TIME, "log")
        return elapsed


def get_logger(label: Optional[str] = None, environ: Optional[Mapping[str, str]] = None, **kwargs: Any) -> Logger:
    """Build a Logger from ``TINTLOG_*`` settings."""
    settings = Settings.from_environ(os.environ if environ is None else environ)
    kwargs.setdefault("environment", settings.environment())
    return Logger(label or settings.label, **kwargs)
