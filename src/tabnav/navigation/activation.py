"""Memory of the document window to jump back to ("ping-pong")."""

from __future__ import annotations

import logging
from typing import Sequence

from .windows import DocumentWindow, active_document_windows, is_qualifying

__all__ = ["ActivationTracker"]

LOGGER = logging.getLogger(__name__)


class ActivationTracker:
    """Two-state machine driven by the host's activation and closing notifications.

    The tracker is either empty or holding one remembered window. Focus moving
    from a document to a tool pane remembers the document; focus landing on a
    document (including a direct document-to-document switch) forgets it.
    """

    def __init__(self) -> None:
        self._remembered: DocumentWindow | None = None

    @property
    def remembered(self) -> DocumentWindow | None:
        return self._remembered

    # ------------------------------------------------------------------
    # Host notifications
    # ------------------------------------------------------------------
    def on_activated(
        self,
        got_focus: DocumentWindow | None,
        lost_focus: DocumentWindow | None,
    ) -> None:
        if is_qualifying(got_focus):
            self._remembered = None
        elif is_qualifying(lost_focus):
            self._remembered = lost_focus
        else:
            self._remembered = None
        LOGGER.debug("Activation %r -> %r; remembering %r", lost_focus, got_focus, self._remembered)

    def on_closing(self, window: DocumentWindow) -> None:
        if self._remembered is not None and self._remembered == window:
            LOGGER.debug("Remembered window %r closed", window)
            self._remembered = None

    # ------------------------------------------------------------------
    # Ping-pong
    # ------------------------------------------------------------------
    def ping_pong(
        self,
        windows: Sequence[DocumentWindow],
        current: DocumentWindow | None,
    ) -> DocumentWindow | None:
        """Return the window to activate for a ping-pong command.

        While holding a window the same window is returned on every call; the
        state only changes through host notifications.
        """

        candidates = active_document_windows(windows)
        if not candidates:
            return None

        if self._remembered is not None:
            return self._remembered

        self._remembered = current
        for window in candidates:
            if window != current:
                return window
        return None
