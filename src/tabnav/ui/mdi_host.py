"""Editor host backed by a Qt multiple-document area."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Mapping

from PySide6.QtCore import QObject, QPoint, Qt, Signal
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QMdiArea, QMdiSubWindow, QPlainTextEdit, QWidget

from ..navigation.commands import Command, TabNavigator
from ..navigation.project_index import FileIndex, ProjectNode
from ..navigation.windows import DOCUMENT_KIND
from ..services.projects import FileSystemNode
from .quick_open import QuickOpenDialog

__all__ = [
    "DEFAULT_SHORTCUTS",
    "TOOL_KIND",
    "FileChooser",
    "MdiDocumentWindow",
    "NavigableSubWindow",
    "MdiEditorHost",
]

LOGGER = logging.getLogger(__name__)

TOOL_KIND = "Tool"
_KIND_PROPERTY = "tabnavKind"
_PATH_PROPERTY = "tabnavPath"

DEFAULT_SHORTCUTS: Mapping[Command, str] = {
    Command.PING_PONG: "Ctrl+Alt+P",
    Command.JUMP_LEFT: "Ctrl+Alt+Left",
    Command.JUMP_RIGHT: "Ctrl+Alt+Right",
    Command.JUMP_UP: "Ctrl+Alt+Up",
    Command.JUMP_DOWN: "Ctrl+Alt+Down",
    Command.OPEN_PROJECT_FILE: "Ctrl+Alt+O",
    Command.OPEN_PROJECT_FILE_IN_OTHER_TARGET: "Ctrl+Alt+Shift+O",
}

FileChooser = Callable[[FileIndex, Callable[[ProjectNode], str]], ProjectNode | None]


class NavigableSubWindow(QMdiSubWindow):
    """Sub-window that reports a close only once it has been accepted."""

    closed = Signal(object)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt naming
        super().closeEvent(event)
        if event.isAccepted():
            self.closed.emit(self)


@dataclass(frozen=True, slots=True)
class MdiDocumentWindow:
    """Navigator view of a sub-window; position is read live from Qt geometry."""

    sub_window: QMdiSubWindow
    kind: str = DOCUMENT_KIND

    @property
    def top(self) -> int:
        return self._origin().y()

    @property
    def left(self) -> int:
        return self._origin().x()

    @property
    def title(self) -> str:
        return self.sub_window.windowTitle()

    @property
    def path(self) -> Path | None:
        value = self.sub_window.property(_PATH_PROPERTY)
        return Path(value) if value else None

    def _origin(self) -> QPoint:
        # Editor space is the top-level window that hosts the MDI area.
        return self.sub_window.mapTo(self.sub_window.window(), QPoint(0, 0))

    def __repr__(self) -> str:
        return f"MdiDocumentWindow({self.title!r}, kind={self.kind!r})"


class MdiEditorHost(QObject):
    """Implements the editor host protocol on top of a :class:`QMdiArea`.

    Sub-windows opened through :meth:`open_document` or :meth:`add_document`
    are documents; panes added with :meth:`add_tool_window` are tool windows
    and never become navigation targets.
    """

    def __init__(
        self,
        area: QMdiArea,
        *,
        projects: Iterable[FileSystemNode] = (),
        chooser: FileChooser | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._area = area
        self._projects: list[FileSystemNode] = list(projects)
        self._chooser: FileChooser = chooser or self._choose_with_dialog
        self._navigator: TabNavigator | None = None
        self._previous: QMdiSubWindow | None = None
        self._active_document: QMdiSubWindow | None = None

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    @property
    def area(self) -> QMdiArea:
        return self._area

    def attach(self, navigator: TabNavigator) -> None:
        """Forward activation and closing notifications to ``navigator``."""

        if self._navigator is None:
            self._area.subWindowActivated.connect(self._on_sub_window_activated)
        self._navigator = navigator

    def install_shortcuts(
        self,
        navigator: TabNavigator,
        parent: QWidget,
        shortcuts: Mapping[Command, str] = DEFAULT_SHORTCUTS,
    ) -> list[QAction]:
        actions: list[QAction] = []
        for command, sequence in shortcuts.items():
            action = QAction(command.name.replace("_", " ").title(), parent)
            action.setShortcut(QKeySequence(sequence))
            action.triggered.connect(lambda _checked=False, command=command: navigator.execute(command))
            parent.addAction(action)
            actions.append(action)
        return actions

    # ------------------------------------------------------------------
    # EditorHost protocol
    # ------------------------------------------------------------------
    def windows(self) -> list[MdiDocumentWindow]:
        return [self.wrap(sub_window) for sub_window in self._area.subWindowList()]

    def active_document_window(self) -> MdiDocumentWindow | None:
        current = self._area.currentSubWindow()
        if current is not None and self._kind_of(current) == DOCUMENT_KIND:
            return self.wrap(current)
        if self._active_document is not None and self._active_document in self._area.subWindowList():
            return self.wrap(self._active_document)
        return None

    def projects(self) -> list[FileSystemNode]:
        return list(self._projects)

    def set_projects(self, projects: Iterable[FileSystemNode]) -> None:
        self._projects = list(projects)

    def activate_window(self, window: MdiDocumentWindow) -> None:
        self._area.setActiveSubWindow(window.sub_window)

    def open_project_file(self, files: FileIndex, *, other_target: bool) -> ProjectNode | None:
        chosen = self._chooser(files, self.label_for)
        if chosen is None:
            return None
        path = Path(chosen.path)  # type: ignore[attr-defined]
        if not other_target:
            existing = self.find_document(path)
            if existing is not None:
                self.activate_window(existing)
                return chosen
        self.open_document(path)
        return chosen

    # ------------------------------------------------------------------
    # Area helpers
    # ------------------------------------------------------------------
    def wrap(self, sub_window: QMdiSubWindow) -> MdiDocumentWindow:
        return MdiDocumentWindow(sub_window, self._kind_of(sub_window))

    def open_document(self, path: Path | str) -> MdiDocumentWindow | None:
        """Open ``path`` in a new text sub-window; unreadable files are skipped."""

        target = Path(path)
        try:
            text = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Unable to open %s: %s", target, exc)
            return None
        editor = QPlainTextEdit()
        editor.setPlainText(text)
        window = self.add_document(editor, target.name, path=target)
        LOGGER.debug("Opened %s", target)
        return window

    def add_document(self, widget: QWidget, title: str, *, path: Path | None = None) -> MdiDocumentWindow:
        sub_window = self._add_sub_window(widget, title, DOCUMENT_KIND)
        if path is not None:
            sub_window.setProperty(_PATH_PROPERTY, str(path))
        return self.wrap(sub_window)

    def add_tool_window(self, widget: QWidget, title: str) -> MdiDocumentWindow:
        return self.wrap(self._add_sub_window(widget, title, TOOL_KIND))

    def find_document(self, path: Path | str) -> MdiDocumentWindow | None:
        target = Path(path)
        for window in self.windows():
            if window.kind == DOCUMENT_KIND and window.path == target:
                return window
        return None

    def label_for(self, node: ProjectNode) -> str:
        for project in self._projects:
            if isinstance(node, FileSystemNode) and node.path.is_relative_to(project.path):
                return f"{project.name}/{node.relative_to(project)}"
        return node.name

    def _add_sub_window(self, widget: QWidget, title: str, kind: str) -> QMdiSubWindow:
        sub_window = NavigableSubWindow()
        sub_window.setWidget(widget)
        sub_window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self._area.addSubWindow(sub_window)
        sub_window.setWindowTitle(title)
        sub_window.setProperty(_KIND_PROPERTY, kind)
        sub_window.closed.connect(self._on_sub_window_closed)
        sub_window.show()
        return sub_window

    def _kind_of(self, sub_window: QMdiSubWindow) -> str:
        return str(sub_window.property(_KIND_PROPERTY) or DOCUMENT_KIND)

    def _choose_with_dialog(
        self,
        files: FileIndex,
        label_for: Callable[[ProjectNode], str],
    ) -> ProjectNode | None:
        return QuickOpenDialog.choose(files, label_for, self._area)

    # ------------------------------------------------------------------
    # Qt notifications
    # ------------------------------------------------------------------
    def _on_sub_window_activated(self, sub_window: QMdiSubWindow | None) -> None:
        got_focus = self.wrap(sub_window) if sub_window is not None else None
        lost_focus = self.wrap(self._previous) if self._previous is not None else None
        self._previous = sub_window
        if got_focus is not None and got_focus.kind == DOCUMENT_KIND:
            self._active_document = sub_window
        if self._navigator is not None:
            self._navigator.on_window_activated(got_focus, lost_focus)

    def _on_sub_window_closed(self, sub_window: QMdiSubWindow) -> None:
        if self._navigator is not None:
            self._navigator.on_window_closing(self.wrap(sub_window))
        # Accepted closes delete the sub-window; drop references before Qt does.
        if sub_window is self._previous:
            self._previous = None
        if sub_window is self._active_document:
            self._active_document = None
