"""Shared test helpers and stub classes.

Import from here instead of duplicating these classes in individual test files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from tabnav.navigation.project_index import FileIndex, ProjectNode
from tabnav.navigation.windows import DocumentWindow, WindowInfo


@dataclass(eq=False)
class StubNode:
    """Project node compared by identity, like host tree items."""

    name: str
    children: list["StubNode"] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"StubNode({self.name!r})"


def doc(title: str, *, top: int = 10, left: int = 10) -> WindowInfo:
    return WindowInfo(title, top=top, left=left)


def tool(title: str, *, top: int = 10, left: int = 10) -> WindowInfo:
    return WindowInfo(title, top=top, left=left, kind="Tool")


class StubHost:
    """In-memory editor host that records activation and open requests.

    Activating a window only changes which window is reported as active; no
    notifications are raised back into the navigator.
    """

    def __init__(
        self,
        windows: Sequence[DocumentWindow] = (),
        *,
        active: DocumentWindow | None = None,
        projects: Sequence[ProjectNode] = (),
    ) -> None:
        self.window_list: list[DocumentWindow] = list(windows)
        self.active = active
        self.project_list: list[ProjectNode] = list(projects)
        self.activated: list[DocumentWindow] = []
        self.open_requests: list[tuple[FileIndex, bool]] = []

    def windows(self) -> list[DocumentWindow]:
        return list(self.window_list)

    def active_document_window(self) -> DocumentWindow | None:
        return self.active

    def projects(self) -> list[ProjectNode]:
        return list(self.project_list)

    def activate_window(self, window: DocumentWindow) -> None:
        self.activated.append(window)
        self.active = window

    def open_project_file(self, files: FileIndex, *, other_target: bool) -> ProjectNode | None:
        self.open_requests.append((files, other_target))
        return next(iter(files), None)
