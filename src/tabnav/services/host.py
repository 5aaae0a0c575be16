"""Capabilities the navigator consumes from the host editor."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from ..navigation.project_index import FileIndex, ProjectNode
from ..navigation.windows import DocumentWindow

__all__ = ["EditorHost"]


class EditorHost(Protocol):
    """Window, project and open-file services provided by an editor integration.

    Subscribing to window notifications is the integration's job; it forwards
    them to :meth:`tabnav.navigation.commands.TabNavigator.on_window_activated`
    and :meth:`~tabnav.navigation.commands.TabNavigator.on_window_closing`.
    """

    def windows(self) -> Sequence[DocumentWindow]:  # pragma: no cover - protocol
        """Return every top-level window in host enumeration order."""
        ...

    def active_document_window(self) -> DocumentWindow | None:  # pragma: no cover - protocol
        ...

    def projects(self) -> Iterable[ProjectNode]:  # pragma: no cover - protocol
        ...

    def activate_window(self, window: DocumentWindow) -> None:  # pragma: no cover - protocol
        ...

    def open_project_file(
        self, files: FileIndex, *, other_target: bool
    ) -> ProjectNode | None:  # pragma: no cover - protocol
        """Let the user pick one of ``files`` and open it, optionally in another view."""
        ...
