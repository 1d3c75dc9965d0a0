from __future__ import annotations


class TintlogError(Exception):
    """Base for internal errors."""


class PaletteError(TintlogError):
    def __init__(self, target: str, missing: list[str]):
        super().__init__(f"Palette '{target}' has no entry for: {', '.join(missing)}")
        self.target = target
        self.missing = missing


class StopwatchNotStartedError(TintlogError):
    def __init__(self) -> None:
        super().__init__("stop() called before start()")
