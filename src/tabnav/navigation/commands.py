"""Command identifiers and the dispatcher that binds them to navigation logic."""

from __future__ import annotations

import logging
import uuid
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Dict

from .activation import ActivationTracker
from .jump import Direction, resolve_jump
from .project_index import ProjectNode, index_projects
from .windows import DocumentWindow

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from ..services.host import EditorHost

__all__ = [
    "COMMAND_SET",
    "Command",
    "UnknownCommandError",
    "TabNavigator",
]

LOGGER = logging.getLogger(__name__)

COMMAND_SET = uuid.UUID("629661e4-603b-446f-86b1-9defbda7d529")


class Command(IntEnum):
    """Host command ids exposed by the navigator."""

    PING_PONG = 0x0100
    JUMP_LEFT = 0x0101
    JUMP_RIGHT = 0x0102
    JUMP_UP = 0x0103
    JUMP_DOWN = 0x0104
    OPEN_PROJECT_FILE = 0x0105
    OPEN_PROJECT_FILE_IN_OTHER_TARGET = 0x0106


class UnknownCommandError(KeyError):
    """Raised when a host invokes an id outside :data:`COMMAND_SET`."""


class TabNavigator:
    """Navigation context constructed once per host session.

    Owns the activation memory and routes command invocations to the jump
    resolver, the ping-pong toggle or the project file index.
    """

    def __init__(self, host: "EditorHost") -> None:
        if host is None:
            raise ValueError("TabNavigator requires a live editor host")
        self._host = host
        self._tracker = ActivationTracker()
        self._handlers: Dict[Command, Callable[[], object]] = {
            Command.PING_PONG: self.ping_pong,
            Command.OPEN_PROJECT_FILE: lambda: self.open_project_file(other_target=False),
            Command.OPEN_PROJECT_FILE_IN_OTHER_TARGET: lambda: self.open_project_file(other_target=True),
        }
        for command in (Command.JUMP_LEFT, Command.JUMP_RIGHT, Command.JUMP_UP, Command.JUMP_DOWN):
            direction = Direction.for_command(command)
            self._handlers[command] = lambda direction=direction: self.jump(direction)

    @property
    def host(self) -> "EditorHost":
        return self._host

    @property
    def tracker(self) -> ActivationTracker:
        return self._tracker

    # ------------------------------------------------------------------
    # Host notifications
    # ------------------------------------------------------------------
    def on_window_activated(
        self,
        got_focus: DocumentWindow | None,
        lost_focus: DocumentWindow | None,
    ) -> None:
        self._tracker.on_activated(got_focus, lost_focus)

    def on_window_closing(self, window: DocumentWindow) -> None:
        self._tracker.on_closing(window)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def execute(self, command: Command | int) -> object:
        """Run the handler bound to ``command`` and return its selection."""

        try:
            resolved = Command(command)
        except ValueError:
            raise UnknownCommandError(command) from None
        LOGGER.info("Executing %s", resolved.name)
        return self._handlers[resolved]()

    def ping_pong(self) -> DocumentWindow | None:
        target = self._tracker.ping_pong(
            self._host.windows(),
            self._host.active_document_window(),
        )
        if target is not None:
            self._host.activate_window(target)
        return target

    def jump(self, direction: Direction) -> DocumentWindow | None:
        target = resolve_jump(
            direction,
            self._host.windows(),
            self._host.active_document_window(),
        )
        if target is not None:
            self._host.activate_window(target)
        return target

    def open_project_file(self, *, other_target: bool = False) -> ProjectNode | None:
        files = index_projects(self._host.projects())
        if not files:
            LOGGER.info("No recognizable project files to open")
            return None
        return self._host.open_project_file(files, other_target=other_target)
