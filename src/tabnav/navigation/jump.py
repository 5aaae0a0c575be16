"""Spatial navigation between open document windows."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from .windows import DocumentWindow, active_document_windows

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from .commands import Command

__all__ = ["Direction", "resolve_jump"]

LOGGER = logging.getLogger(__name__)


class Direction(Enum):
    """Jump direction as (axis attribute, index step)."""

    LEFT = ("left", -1)
    RIGHT = ("left", 1)
    UP = ("top", -1)
    DOWN = ("top", 1)

    @property
    def axis(self) -> str:
        return self.value[0]

    @property
    def step(self) -> int:
        return self.value[1]

    @classmethod
    def for_command(cls, command: "Command") -> "Direction":
        """Map a ``JUMP_*`` command to its direction."""

        _, _, name = command.name.partition("JUMP_")
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"{command!r} is not a jump command") from None


def resolve_jump(
    direction: Direction,
    windows: Sequence[DocumentWindow],
    current: DocumentWindow | None,
) -> DocumentWindow | None:
    """Return the neighbour of ``current`` along ``direction``, wrapping at the ends.

    Returns ``None`` when no window qualifies or when ``current`` is not among
    the qualifying windows (e.g. focus sits on a tool pane).
    """

    candidates = active_document_windows(windows)
    count = len(candidates)
    if count == 0:
        return None

    ordered = sorted(candidates, key=lambda window: getattr(window, direction.axis))
    index = next((i for i, window in enumerate(ordered) if window == current), None)
    if index is None:
        LOGGER.debug("Active window %r is not a navigable document; ignoring jump", current)
        return None

    target = ordered[(index + direction.step) % count]
    LOGGER.debug("Jump %s: %r -> %r", direction.name.lower(), current, target)
    return target
