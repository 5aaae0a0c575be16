"""Tests for environment-driven runtime settings."""

from __future__ import annotations

import pytest

from tabnav.services.settings import Settings, load_settings


def test_defaults_without_environment() -> None:
    assert load_settings({}) == Settings()


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on ", "debug"])
def test_truthy_debug_flag(raw: str) -> None:
    settings = load_settings({"TABNAV_DEBUG_LOGGING": raw})

    assert settings.debug_logging is True


def test_falsy_console_flag() -> None:
    settings = load_settings({"TABNAV_CONSOLE_LOGGING": "off"})

    assert settings.console_logging is False


def test_log_dir_from_environment(tmp_path) -> None:
    settings = load_settings({"TABNAV_LOG_DIR": str(tmp_path)})

    assert settings.log_dir == str(tmp_path)


def test_empty_log_dir_is_ignored() -> None:
    assert load_settings({"TABNAV_LOG_DIR": ""}).log_dir is None


def test_overrides_win_over_environment() -> None:
    settings = load_settings(
        {"TABNAV_DEBUG_LOGGING": "0", "TABNAV_LOG_DIR": "/var/log/tabnav"},
        overrides={"debug_logging": True, "log_dir": None, "unknown": 3},
    )

    assert settings.debug_logging is True
    assert settings.log_dir == "/var/log/tabnav"


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TABNAV_DEBUG_LOGGING", "yes")

    assert load_settings().debug_logging is True
