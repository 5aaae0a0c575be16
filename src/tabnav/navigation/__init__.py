"""Window selection and project indexing logic, independent of any GUI toolkit."""

from .activation import ActivationTracker
from .commands import COMMAND_SET, Command, TabNavigator, UnknownCommandError
from .extensions import RECOGNIZED_EXTENSIONS, is_recognized
from .jump import Direction, resolve_jump
from .project_index import FileIndex, ProjectNode, build_file_index, index_node, index_projects
from .windows import DOCUMENT_KIND, DocumentWindow, WindowInfo, active_document_windows, is_qualifying

__all__ = [
    "ActivationTracker",
    "COMMAND_SET",
    "Command",
    "DOCUMENT_KIND",
    "Direction",
    "DocumentWindow",
    "FileIndex",
    "ProjectNode",
    "RECOGNIZED_EXTENSIONS",
    "TabNavigator",
    "UnknownCommandError",
    "WindowInfo",
    "active_document_windows",
    "build_file_index",
    "index_node",
    "index_projects",
    "is_qualifying",
    "is_recognized",
    "resolve_jump",
]
