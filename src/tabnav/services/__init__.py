"""Service layer helpers (host protocol, projects, settings)."""

from .host import EditorHost
from .projects import FileSystemNode, load_projects
from .settings import Settings, load_settings

__all__ = [
    "EditorHost",
    "FileSystemNode",
    "Settings",
    "load_projects",
    "load_settings",
]
