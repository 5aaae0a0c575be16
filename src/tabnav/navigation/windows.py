"""Window model shared by the jump resolver and the activation tracker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

__all__ = [
    "DOCUMENT_KIND",
    "DocumentWindow",
    "WindowInfo",
    "is_qualifying",
    "active_document_windows",
]

DOCUMENT_KIND = "Document"


class DocumentWindow(Protocol):
    """An editor pane as exposed by the host.

    Instances are opaque to the navigation layer: they are compared with ``==``
    and never created or destroyed here.
    """

    @property
    def kind(self) -> str:  # pragma: no cover - protocol
        ...

    @property
    def top(self) -> int:  # pragma: no cover - protocol
        ...

    @property
    def left(self) -> int:  # pragma: no cover - protocol
        ...


@dataclass(slots=True, eq=False)
class WindowInfo:
    """Plain window record for hosts that have no native window objects."""

    title: str
    top: int
    left: int
    kind: str = DOCUMENT_KIND

    def __repr__(self) -> str:
        return f"WindowInfo({self.title!r}, top={self.top}, left={self.left}, kind={self.kind!r})"


def is_qualifying(window: DocumentWindow | None) -> bool:
    """Return ``True`` for document windows that are not docked at the origin."""

    if window is None:
        return False
    if window.kind != DOCUMENT_KIND:
        return False
    return window.top != 0 or window.left != 0


def active_document_windows(windows: Iterable[DocumentWindow]) -> list[DocumentWindow]:
    """Return the qualifying windows, preserving host enumeration order."""

    return [window for window in windows if is_qualifying(window)]
