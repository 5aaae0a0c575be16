"""Root logger wiring for the tabnav launcher."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from ..services.settings import Settings

__all__ = ["DEFAULT_LOG_DIR", "LOG_FILE_NAME", "log_path_for", "setup_logging"]

DEFAULT_LOG_DIR = Path.home() / ".tabnav" / "logs"
LOG_FILE_NAME = "tabnav.log"

_FILE_HANDLER = "tabnav-file"
_CONSOLE_HANDLER = "tabnav-console"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_path_for(settings: "Settings") -> Path:
    return Path(settings.log_dir or DEFAULT_LOG_DIR).expanduser() / LOG_FILE_NAME


def setup_logging(
    settings: "Settings",
    *,
    force: bool = False,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> Path:
    """Attach tabnav's handlers to the root logger and return the log file.

    A second call keeps the handlers already installed unless ``force`` is
    set, in which case they are closed and rebuilt from ``settings``.
    """

    root = logging.getLogger()
    installed = [handler for handler in root.handlers if handler.get_name() in (_FILE_HANDLER, _CONSOLE_HANDLER)]
    if installed and not force:
        for handler in installed:
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                return Path(handler.baseFilename)
    for handler in installed:
        root.removeHandler(handler)
        handler.close()

    log_path = log_path_for(settings)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.set_name(_FILE_HANDLER)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if settings.console_logging:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    root.setLevel(logging.DEBUG if settings.debug_logging else logging.INFO)
    logging.captureWarnings(True)
    return log_path
