"""Severity categories and their per-target style tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from .errors import PaletteError


class Severity(str, Enum):
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"
    NORMAL = "normal"
    WARNING = "warning"
    DEBUG = "debug"
    TIME = "time"


class RenderTarget(str, Enum):
    TERMINAL = "terminal"
    BROWSER = "browser"


@dataclass(frozen=True, slots=True)
class TerminalStyle:
    open: str
    close: str = "\x1b[0m"

    def apply(self, text: str) -> str:
        return f"{self.open}{text}{self.close}"


@dataclass(frozen=True, slots=True)
class BrowserStyle:
    color: str

    @property
    def css(self) -> str:
        return f"color: {self.color}"


StyleToken = Union[TerminalStyle, BrowserStyle]

TYPE_LABELS: Dict[str, str] = {
    "error": "ERROR",
    "debug": "DEBUG",
    "info": "INFO",
    "success": "SUCCS",
    "log": "LOG",
    "warning": "WARN",
    "time": "TIME",
}

NEUTRAL_BROWSER = BrowserStyle("black")

TERMINAL_PALETTE: Dict[Severity, TerminalStyle] = {
    Severity.INFO: TerminalStyle("\x1b[36;1m"),
    Severity.ERROR: TerminalStyle("\x1b[31;1m"),
    Severity.SUCCESS: TerminalStyle("\x1b[32;1m"),
    Severity.NORMAL: TerminalStyle("\x1b[0m"),
    Severity.WARNING: TerminalStyle("\x1b[33;1m"),
    Severity.DEBUG: TerminalStyle("\x1b[35;1m"),
    Severity.TIME: TerminalStyle("\x1b[33m"),
}

BROWSER_PALETTE: Dict[Severity, BrowserStyle] = {
    Severity.INFO: BrowserStyle("#12d9d9"),
    Severity.ERROR: BrowserStyle("#EE0000"),
    Severity.SUCCESS: BrowserStyle("#00B300"),
    Severity.NORMAL: BrowserStyle("#333333"),
    Severity.WARNING: BrowserStyle("#ff9000"),
    Severity.DEBUG: BrowserStyle("#cc00cc"),
    Severity.TIME: BrowserStyle("#7c2020"),
}

_PALETTES: Dict[RenderTarget, Dict[Severity, StyleToken]] = {
    RenderTarget.TERMINAL: TERMINAL_PALETTE,
    RenderTarget.BROWSER: BROWSER_PALETTE,
}


def check_palettes() -> None:
    """Raise PaletteError if any target lacks a style for some category."""
    for target, table in _PALETTES.items():
        missing = [member.value for member in Severity if member not in table]
        if missing:
            raise PaletteError(target.value, missing)


def resolve(category: Severity, target: RenderTarget) -> StyleToken:
    return _PALETTES[target][category]


check_palettes()
