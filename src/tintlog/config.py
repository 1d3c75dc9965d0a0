from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .palette import RenderTarget

ENV_PREFIX = "TINTLOG_"
TARGET_CHOICES = ("auto", "terminal", "browser")
# Hosts that frame console output themselves, so a wall-clock prefix is noise.
FRAMED_MODES = frozenset({"worker", "react-native", "reactnative"})

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Environment:
    """Answers of the environment probe."""

    browser: bool
    suppress_timestamps: bool = False

    @property
    def target(self) -> RenderTarget:
        return RenderTarget.BROWSER if self.browser else RenderTarget.TERMINAL


def _is_browser() -> bool:
    try:
        import js  # type: ignore
    except ImportError:
        return False
    return getattr(js, "window", None) is not None and getattr(js, "navigator", None) is not None


def detect_environment(mode: Optional[str] = None) -> Environment:
    normalized = (mode or "").strip().lower()
    return Environment(browser=_is_browser(), suppress_timestamps=normalized in FRAMED_MODES)


def _parse_flag(key: str, raw: Optional[str]) -> Optional[bool]:
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {key}: {raw!r}")


@dataclass(slots=True)
class Settings:
    """Logger settings resolved from ``TINTLOG_*`` environment variables."""

    target: str = "auto"
    timestamps: Optional[bool] = None
    mode: str = ""
    label: str = "app"

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "Settings":
        target = (environ.get(f"{ENV_PREFIX}TARGET") or "auto").strip().lower()
        if target not in TARGET_CHOICES:
            raise ValueError(f"Invalid value for {ENV_PREFIX}TARGET: {target!r}")
        return cls(
            target=target,
            timestamps=_parse_flag(f"{ENV_PREFIX}TIMESTAMPS", environ.get(f"{ENV_PREFIX}TIMESTAMPS")),
            mode=(environ.get(f"{ENV_PREFIX}MODE") or "").strip(),
            label=(environ.get(f"{ENV_PREFIX}LABEL") or "").strip() or "app",
        )

    def environment(self) -> Environment:
        """Combine explicit settings with the probe; explicit values win."""
        probed = detect_environment(self.mode)
        browser = probed.browser if self.target == "auto" else self.target == "browser"
        suppress = probed.suppress_timestamps if self.timestamps is None else not self.timestamps
        return Environment(browser=browser, suppress_timestamps=suppress)
