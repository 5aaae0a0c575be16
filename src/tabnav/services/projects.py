"""Project trees backed by directories on disk."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

__all__ = ["FileSystemNode", "load_projects"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileSystemNode:
    """A file or directory exposed through the project-node interface.

    Children are listed on access: directories first, then files, each sorted
    by name. Hidden entries (leading ``.``) are skipped. Unreadable directories
    behave as leaves.
    """

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def children(self) -> tuple["FileSystemNode", ...]:
        if not self.path.is_dir():
            return ()
        try:
            with os.scandir(self.path) as entries:
                visible = [entry for entry in entries if not entry.name.startswith(".")]
        except OSError as exc:
            LOGGER.warning("Unable to list %s: %s", self.path, exc)
            return ()
        visible.sort(key=lambda entry: (not _is_dir(entry), entry.name.lower(), entry.name))
        return tuple(FileSystemNode(Path(entry.path)) for entry in visible)

    def relative_to(self, root: "FileSystemNode") -> str:
        try:
            return self.path.relative_to(root.path).as_posix()
        except ValueError:
            return str(self.path)


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def load_projects(paths: Iterable[Path | str]) -> list[FileSystemNode]:
    """Wrap each project directory as a root node."""

    projects: list[FileSystemNode] = []
    for raw in paths:
        path = Path(raw).expanduser().resolve()
        if not path.is_dir():
            raise FileNotFoundError(f"Project directory not found: {path}")
        projects.append(FileSystemNode(path))
    return projects
