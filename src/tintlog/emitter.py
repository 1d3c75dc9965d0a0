"""Writes a formatted LogEvent to the host console."""

from __future__ import annotations

from typing import List, Tuple

from .console import HostConsole
from .formatter import LogEvent
from .palette import NEUTRAL_BROWSER, BrowserStyle, RenderTarget

CHANNELS = ("log", "warn", "error", "info", "debug")


def build_template(event: LogEvent) -> Tuple[str, List[str]]:
    """Return the ``%c`` template and one CSS argument per marker."""
    template = " ".join(f"%c{segment}" for segment in event.text)
    styles: List[str] = []
    for index in range(len(event.text)):
        token = event.colors[index] if index < len(event.colors) else NEUTRAL_BROWSER
        styles.append(token.css if isinstance(token, BrowserStyle) else NEUTRAL_BROWSER.css)
    return template, styles


def emit(event: LogEvent, target: RenderTarget, channel: str, console: HostConsole) -> None:
    if channel not in CHANNELS:
        channel = "log"
    writer = getattr(console, channel, None) or console.log
    if target is RenderTarget.BROWSER:
        template, styles = build_template(event)
        writer(template, *styles)
    else:
        writer(" ".join(event.text))
