from __future__ import annotations

import sys

import pytest
from typer.testing import CliRunner

from src.tintlog.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for key in ("TINTLOG_TARGET", "TINTLOG_TIMESTAMPS", "TINTLOG_MODE", "TINTLOG_LABEL"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def test_emit_writes_one_line():
    result = runner.invoke(app, ["emit", "info", "hello", "world", "--label", "sh", "--no-timestamps"])

    assert result.exit_code == 0
    assert "INFO" in result.output
    assert "[sh]:" in result.output
    assert "hello world" in result.output


def test_emit_rejects_unknown_level():
    result = runner.invoke(app, ["emit", "loud", "x"])
    assert result.exit_code != 0


def test_emit_browser_target_prints_template():
    result = runner.invoke(app, ["emit", "log", "x", "--target", "browser", "--no-timestamps", "-l", "b"])
    assert result.exit_code == 0
    assert "%cLOG %c[b]: %cx color: #333333 color: black color: #333333" in result.output


def test_env_file_supplies_label(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("TINTLOG_LABEL=from-file\nTINTLOG_TIMESTAMPS=0\n")

    result = runner.invoke(app, ["emit", "success", "ok", "--env-file", str(env_file)])

    assert result.exit_code == 0
    assert "[from-file]:" in result.output
    assert not result.output.startswith("[")


def test_demo_runs_every_category():
    result = runner.invoke(app, ["demo", "--no-timestamps", "--target", "terminal"])
    assert result.exit_code == 0
    for label in ("LOG", "INFO", "SUCCS", "DEBUG", "TIME"):
        assert label in result.output


def test_time_reports_duration_and_exit_code():
    result = runner.invoke(app, ["time", "--no-timestamps", sys.executable, "-c", "raise SystemExit(3)"])
    assert result.exit_code == 3
    assert "Start timer" in result.output
    assert "Duration +" in result.output


def test_time_missing_command_exits_127():
    result = runner.invoke(app, ["time", "--no-timestamps", "definitely-not-a-command-xyz"])
    assert result.exit_code == 127
