"""Host console that maps to Pyodide's ``js.console`` when available."""

from __future__ import annotations

import sys
from typing import Any, Optional, Protocol, TextIO

try:  # pragma: no cover - only available inside Pyodide
    from js import console as _js_console  # type: ignore
except ImportError:  # pragma: no cover
    _js_console = None  # type: ignore

from .palette import RenderTarget


class HostConsole(Protocol):
    def log(self, *args: Any) -> None: ...
    def warn(self, *args: Any) -> None: ...
    def error(self, *args: Any) -> None: ...
    def info(self, *args: Any) -> None: ...
    def debug(self, *args: Any) -> None: ...


class StreamConsole:
    """Terminal console: log/info/debug go to stdout, warn/error to stderr."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err

    def _write(self, stream: Optional[TextIO], fallback: TextIO, args: tuple) -> None:
        text = " ".join(str(arg) for arg in args)
        print(text, file=stream or fallback, flush=True)

    def log(self, *args: Any) -> None:
        self._write(self._out, sys.stdout, args)

    info = log
    debug = log

    def warn(self, *args: Any) -> None:
        self._write(self._err, sys.stderr, args)

    error = warn


def browser_console() -> Optional[Any]:
    return _js_console


def resolve_console(target: RenderTarget) -> HostConsole:
    if target is RenderTarget.BROWSER and _js_console is not None:
        return _js_console
    return StreamConsole()
