"""Typer-powered command line front-end for tintlog."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from .config import TARGET_CHOICES, Settings
from .logger import Logger

app = typer.Typer(help="Write color-coded log lines from the shell.")

LEVELS = ("debug", "info", "warn", "warning", "error", "success", "log")


def _resolve_env_file(explicit: Optional[Path]) -> Optional[Path]:
    if explicit:
        return explicit.expanduser().resolve()
    default_path = Path.cwd() / ".env"
    return default_path if default_path.exists() else None


def _build_logger(
    label: Optional[str],
    target: Optional[str],
    timestamps: Optional[bool],
    env_file: Optional[Path],
) -> Logger:
    path = _resolve_env_file(env_file)
    if path is not None:
        load_dotenv(path)
    try:
        settings = Settings.from_environ(os.environ)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if target:
        if target not in TARGET_CHOICES:
            raise typer.BadParameter(f"target must be one of: {', '.join(TARGET_CHOICES)}")
        settings.target = target
    if timestamps is not None:
        settings.timestamps = timestamps
    environment = settings.environment()
    return Logger(
        label or settings.label,
        target=environment.target,
        timestamps=not environment.suppress_timestamps,
    )


_LABEL = typer.Option(None, "--label", "-l", help="Source label shown as [label]:.")
_TARGET = typer.Option(None, "--target", "-t", help="Render target (auto|terminal|browser).")
_TIMESTAMPS = typer.Option(None, "--timestamps/--no-timestamps", help="Force the time prefix on or off.")
_ENV_FILE = typer.Option(None, "--env-file", help="Optional .env file with TINTLOG_* settings.")


@app.command("emit")
def emit_line(
    level: str = typer.Argument(..., help="One of debug|info|warn|warning|error|success|log."),
    message: List[str] = typer.Argument(..., help="Message parts, joined with spaces."),
    label: Optional[str] = _LABEL,
    target: Optional[str] = _TARGET,
    timestamps: Optional[bool] = _TIMESTAMPS,
    env_file: Optional[Path] = _ENV_FILE,
) -> None:
    level = level.lower()
    if level not in LEVELS:
        raise typer.BadParameter(f"level must be one of: {', '.join(LEVELS)}")
    logger = _build_logger(label, target, timestamps, env_file)
    getattr(logger, level)(" ".join(message))


@app.command("demo")
def demo(
    label: Optional[str] = _LABEL,
    target: Optional[str] = _TARGET,
    timestamps: Optional[bool] = _TIMESTAMPS,
    env_file: Optional[Path] = _ENV_FILE,
) -> None:
    logger = _build_logger(label, target, timestamps, env_file)
    logger.start()
    logger.log("plain message")
    logger.info("info with data: ", {"user": "ada", "roles": ["admin"]})
    logger.success("done")
    logger.warn("disk at ", 91, "%")
    logger.debug("cyclic: ", _cyclic_sample())
    logger.error("failed: ", {"code": 5})
    logger.stop()


def _cyclic_sample() -> dict:
    node: dict = {"name": "root"}
    node["self"] = node
    return node


@app.command(
    "time",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def time_command(
    command: List[str] = typer.Argument(..., help="Command to run and time."),
    label: Optional[str] = _LABEL,
    target: Optional[str] = _TARGET,
    timestamps: Optional[bool] = _TIMESTAMPS,
    env_file: Optional[Path] = _ENV_FILE,
) -> None:
    logger = _build_logger(label, target, timestamps, env_file)
    logger.start()
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        logger.error("could not run ", command[0], ": ", exc)
        raise typer.Exit(127)
    logger.stop()
    if completed.returncode != 0:
        logger.error("exit code ", completed.returncode)
    raise typer.Exit(completed.returncode)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
