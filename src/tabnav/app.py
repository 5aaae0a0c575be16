"""Command-line launcher for the tabnav desktop window."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Sequence, cast

from .services.projects import load_projects
from .services.settings import Settings, load_settings
from .utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: Settings, *, force: bool = False) -> Path:
    """Configure structured logging for the application."""

    log_path = logging_utils.setup_logging(settings, force=force)
    _LOGGER.debug("Logging to %s (debug=%s)", log_path, settings.debug_logging)
    return log_path


def create_qapp() -> Any:
    """Return the running QApplication, creating one if needed."""

    try:  # Local import keeps the CLI importable for argument parsing.
        from PySide6.QtWidgets import QApplication
    except ImportError as exc:  # pragma: no cover - depends on desktop stack
        raise RuntimeError("PySide6 must be installed to launch the tabnav window.") from exc

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    app = cast(Any, QApplication.instance() or QApplication(sys.argv))
    app.setApplicationName("tabnav")
    _install_qt_message_handler()
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point invoked by the `tabnav` console script."""

    args = _parse_cli_args(argv)
    settings = load_settings(
        overrides={
            "debug_logging": True if args.debug else None,
            "log_dir": args.log_dir,
        }
    )
    configure_logging(settings)

    try:
        projects = load_projects(args.projects)
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 2

    app = create_qapp()
    from .ui.main_window import NavigatorWindow

    window = NavigatorWindow(projects)
    window.resize(1200, 800)
    window.show()
    _LOGGER.info("Opened %s project(s)", len(projects))
    return int(app.exec())


def _parse_cli_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tabnav",
        description="Open project directories in a window with directional tab navigation.",
    )
    parser.add_argument("projects", nargs="*", default=[], metavar="PROJECT_DIR", help="Project directories to index.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-dir", dest="log_dir", default=None, help="Directory for the rotating log file.")
    return parser.parse_args(list(argv) if argv is not None else None)


def _install_qt_message_handler() -> None:
    """Redirect Qt warnings to the Python logging stack."""

    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _handler(mode, context, message):  # type: ignore[no-untyped-def]
        del context
        level = level_map.get(mode, logging.INFO)
        logging.getLogger("PySide6").log(level, message)

    qInstallMessageHandler(_handler)


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
