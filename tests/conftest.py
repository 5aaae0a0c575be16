"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

from tests.helpers import StubNode

# Qt tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def sample_project() -> StubNode:
    """Project whose items mix recognized, unknown and container entries."""

    return StubNode(
        "Sample",
        [
            StubNode("a.cpp"),
            StubNode("c.unknown"),
            StubNode("d.png", [StubNode("b.txt")]),
        ],
    )
