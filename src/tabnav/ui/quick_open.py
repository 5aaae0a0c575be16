"""Searchable quick-open dialog over a project file index."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..navigation.project_index import FileIndex, ProjectNode

__all__ = ["QuickOpenDialog"]

LabelFor = Callable[[ProjectNode], str]


class QuickOpenDialog(QDialog):
    """Lists indexed files and narrows them as the user types.

    Rows are mapped back to nodes by position, so entries that share a label
    (same-named projects) stay distinct.
    """

    def __init__(
        self,
        files: FileIndex,
        label_for: LabelFor,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Open project file")
        self.setObjectName("tabnav-quick-open")
        self._files = files
        self._label_for = label_for
        self._shown: list[ProjectNode] = []

        layout = QVBoxLayout(self)
        self._search_input = QLineEdit()
        self._search_input.setPlaceholderText("Filter files…")
        self._search_input.textChanged.connect(self._handle_query_changed)
        layout.addWidget(self._search_input)
        self._list_widget = QListWidget()
        self._list_widget.itemActivated.connect(lambda _item: self.accept())
        layout.addWidget(self._list_widget)
        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Open | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self._render(files.filter(""))

    @classmethod
    def choose(cls, files: FileIndex, label_for: LabelFor, parent: QWidget | None = None) -> ProjectNode | None:
        dialog = cls(files, label_for, parent)
        if not dialog.exec():
            return None
        return dialog.selected_node()

    @property
    def search_input(self) -> QLineEdit:
        return self._search_input

    @property
    def list_widget(self) -> QListWidget:
        return self._list_widget

    def selected_node(self) -> ProjectNode | None:
        row = self._list_widget.currentRow()
        if 0 <= row < len(self._shown):
            return self._shown[row]
        return None

    def _handle_query_changed(self, text: str) -> None:
        self._render(self._files.filter(text))

    def _render(self, nodes: list[ProjectNode]) -> None:
        self._shown = nodes
        self._list_widget.clear()
        for node in nodes:
            self._list_widget.addItem(QListWidgetItem(self._label_for(node)))
        if self._list_widget.count():
            self._list_widget.setCurrentRow(0)
