"""Flat index of recognizable files gathered from a project tree."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Protocol

from .extensions import is_recognized

__all__ = ["ProjectNode", "FileIndex", "index_node", "build_file_index", "index_projects"]

LOGGER = logging.getLogger(__name__)


class ProjectNode(Protocol):
    """One entry of the host's project tree: a container or a leaf file."""

    @property
    def name(self) -> str:  # pragma: no cover - protocol
        ...

    @property
    def children(self) -> Iterable["ProjectNode"]:  # pragma: no cover - protocol
        ...


class FileIndex:
    """Set of project nodes accepted by one indexing run.

    Membership follows node equality, so re-adding a node is a no-op. Iteration
    follows insertion order, which keeps pickers stable between runs over the
    same tree.
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[ProjectNode] = ()) -> None:
        self._nodes: dict[ProjectNode, None] = {}
        for node in nodes:
            self.add(node)

    def add(self, node: ProjectNode) -> None:
        self._nodes.setdefault(node, None)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[ProjectNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __repr__(self) -> str:
        return f"FileIndex({self.names()!r})"

    def names(self) -> list[str]:
        return [node.name for node in self._nodes]

    def filter(self, query: str) -> list[ProjectNode]:
        """Return nodes whose name contains ``query`` (case-insensitive)."""

        needle = query.strip().lower()
        if not needle:
            return list(self._nodes)
        return [node for node in self._nodes if needle in node.name.lower()]


def index_node(node: ProjectNode, into: FileIndex) -> None:
    """Add ``node`` and its recognizable descendants to ``into``.

    Leaves are tested before descending and every node is tested again once
    its children were visited, so a container whose own name carries an
    allowlisted extension is indexed alongside its files.
    """

    children = list(node.children)
    if not children and is_recognized(node.name):
        into.add(node)

    for child in children:
        index_node(child, into)

    if is_recognized(node.name):
        into.add(node)


def build_file_index(root: ProjectNode) -> FileIndex:
    """Index a single tree rooted at ``root``."""

    index = FileIndex()
    index_node(root, index)
    return index


def index_projects(projects: Iterable[ProjectNode]) -> FileIndex:
    """Index the top-level items of every project into one fresh :class:`FileIndex`."""

    index = FileIndex()
    project_count = 0
    for project in projects:
        project_count += 1
        for item in project.children:
            index_node(item, index)
    LOGGER.debug("Indexed %s file(s) across %s project(s)", len(index), project_count)
    return index
