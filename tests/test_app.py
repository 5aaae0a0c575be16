"""Tests covering the launcher helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from tabnav import app
from tabnav.services.settings import Settings


@pytest.fixture
def logging_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def _record(settings: Settings, **kwargs: Any) -> Path:
        calls.append({"settings": settings, **kwargs})
        return Path("tabnav.log")

    monkeypatch.setattr(app.logging_utils, "setup_logging", _record)
    return calls


def test_configure_logging_passes_settings(logging_calls: list[dict[str, Any]]) -> None:
    settings = Settings(debug_logging=True, console_logging=False, log_dir="/tmp/tabnav")

    log_path = app.configure_logging(settings)

    assert log_path == Path("tabnav.log")
    assert logging_calls == [{"settings": settings, "force": False}]


def test_parse_cli_args_collects_projects() -> None:
    args = app._parse_cli_args(["one", "two", "--debug", "--log-dir", "logs"])

    assert args.projects == ["one", "two"]
    assert args.debug is True
    assert args.log_dir == "logs"


def test_parse_cli_args_defaults() -> None:
    args = app._parse_cli_args([])

    assert args.projects == []
    assert args.debug is False
    assert args.log_dir is None


def test_main_rejects_missing_project(
    tmp_path: Path,
    logging_calls: list[dict[str, Any]],
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("TABNAV_DEBUG_LOGGING", raising=False)

    status = app.main([str(tmp_path / "missing"), "--debug"])

    assert status == 2
    assert "Project directory not found" in capsys.readouterr().err
    assert logging_calls[0]["settings"].debug_logging is True
