"""Runtime settings resolved from the environment and command-line overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

__all__ = ["Settings", "load_settings"]

LOGGER = logging.getLogger(__name__)

_ENV_OVERRIDES: Mapping[str, str] = {
    "TABNAV_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "TABNAV_DEBUG_LOGGING": "debug_logging",
    "TABNAV_CONSOLE_LOGGING": "console_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


@dataclass(slots=True)
class Settings:
    """Process-wide knobs; navigation behavior itself is not configurable."""

    debug_logging: bool = False
    console_logging: bool = True
    log_dir: str | None = None


def load_settings(
    env: Mapping[str, str] | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Return defaults updated by ``TABNAV_*`` variables, then by ``overrides``.

    Unknown override keys and ``None`` values are ignored.
    """

    environ = os.environ if env is None else env
    settings = _apply_overrides(Settings(), _env_overrides(environ), source="environment")
    if overrides:
        settings = _apply_overrides(settings, overrides)
    return settings


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            overrides[field_name] = value
    for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value is not None:
            overrides[field_name] = value.strip().lower() in _TRUE_VALUES
    return overrides


def _apply_overrides(
    settings: Settings,
    overrides: Mapping[str, Any],
    *,
    source: str = "runtime",
) -> Settings:
    allowed = {field.name for field in fields(Settings)}
    filtered: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in allowed or value is None:
            continue
        filtered[key] = value
    if filtered:
        LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
        settings = replace(settings, **filtered)
    return settings
