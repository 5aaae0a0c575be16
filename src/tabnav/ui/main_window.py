"""Main window hosting the MDI area, navigator shortcuts and a project pane."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFileDialog, QListWidget, QListWidgetItem, QMainWindow, QMdiArea, QMessageBox, QWidget

from ..navigation.commands import TabNavigator
from ..navigation.project_index import index_projects
from ..services.projects import FileSystemNode, load_projects
from .mdi_host import FileChooser, MdiEditorHost

__all__ = ["NavigatorWindow"]

LOGGER = logging.getLogger(__name__)

_NODE_ROLE = Qt.ItemDataRole.UserRole


class NavigatorWindow(QMainWindow):
    """Top-level window wiring a :class:`MdiEditorHost` to a :class:`TabNavigator`."""

    def __init__(
        self,
        projects: Iterable[FileSystemNode] = (),
        *,
        chooser: FileChooser | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("tabnav")
        self._area = QMdiArea(self)
        self.setCentralWidget(self._area)

        self._host = MdiEditorHost(self._area, projects=projects, chooser=chooser, parent=self)
        self._navigator = TabNavigator(self._host)
        self._host.attach(self._navigator)

        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction("Open &Project…", self._prompt_for_project)

        actions = self._host.install_shortcuts(self._navigator, self)
        navigate_menu = self.menuBar().addMenu("&Navigate")
        navigate_menu.addActions(actions)
        window_menu = self.menuBar().addMenu("&Window")
        window_menu.addAction("Tile", self._area.tileSubWindows)
        window_menu.addAction("Cascade", self._area.cascadeSubWindows)

        self._project_list = QListWidget()
        self._project_list.itemActivated.connect(self._open_list_item)
        self._host.add_tool_window(self._project_list, "Project files")
        self.refresh_project_list()

    @property
    def host(self) -> MdiEditorHost:
        return self._host

    @property
    def navigator(self) -> TabNavigator:
        return self._navigator

    def add_project(self, path: Path | str) -> FileSystemNode:
        """Index another project directory and list its files in the pane."""

        (project,) = load_projects([path])
        self._host.set_projects([*self._host.projects(), project])
        self.refresh_project_list()
        LOGGER.info("Added project %s", project.path)
        return project

    def refresh_project_list(self) -> None:
        self._project_list.clear()
        for node in index_projects(self._host.projects()):
            item = QListWidgetItem(self._host.label_for(node))
            item.setData(_NODE_ROLE, str(node.path))
            self._project_list.addItem(item)
        LOGGER.debug("Project pane lists %s file(s)", self._project_list.count())

    def _open_list_item(self, item: QListWidgetItem) -> None:
        path = item.data(_NODE_ROLE)
        existing = self._host.find_document(path)
        if existing is not None:
            self._host.activate_window(existing)
        else:
            self._host.open_document(path)

    def _prompt_for_project(self) -> None:
        directory = QFileDialog.getExistingDirectory(self, "Open project directory")
        if not directory:
            return
        try:
            self.add_project(directory)
        except FileNotFoundError as exc:
            QMessageBox.warning(self, "Open project", str(exc))
