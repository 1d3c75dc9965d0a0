"""Turns one logging call into ordered text segments and style tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple, cast

from dateutil import tz

from .palette import (
    NEUTRAL_BROWSER,
    BrowserStyle,
    RenderTarget,
    Severity,
    StyleToken,
    TerminalStyle,
    resolve,
)


@dataclass(frozen=True, slots=True)
class LogEvent:
    text: Tuple[str, ...]
    colors: Tuple[StyleToken, ...] = ()


def local_now() -> datetime:
    return datetime.now(tz.tzlocal())


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Return ``[HH:MM:SS.mmm]`` for ``moment`` (default: local now)."""
    moment = moment or local_now()
    return f"[{moment:%H:%M:%S}.{moment.microsecond // 1000:03d}]"


def format_event(
    message: str,
    type_label: str,
    category: Severity,
    *,
    label: str,
    target: RenderTarget,
    include_timestamp: bool = True,
    now: Optional[datetime] = None,
) -> LogEvent:
    source = f"[{label}]:"

    if target is RenderTarget.TERMINAL:
        style = cast(TerminalStyle, resolve(category, target))
        neutral = cast(TerminalStyle, resolve(Severity.NORMAL, target))
        text: List[str] = [style.apply(type_label), neutral.apply(source), style.apply(message)]
        if include_timestamp:
            text.insert(0, format_timestamp(now))
        return LogEvent(text=tuple(text))

    browser_style = cast(BrowserStyle, resolve(category, target))
    text = [type_label, source, message]
    colors: List[StyleToken] = [browser_style, NEUTRAL_BROWSER, browser_style]
    if include_timestamp:
        text.insert(0, format_timestamp(now))
        colors.insert(0, NEUTRAL_BROWSER)
    return LogEvent(text=tuple(text), colors=tuple(colors))
