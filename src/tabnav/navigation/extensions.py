"""Allowlist of file-name extensions shown in the project file index."""

from __future__ import annotations

__all__ = ["RECOGNIZED_EXTENSIONS", "is_recognized"]

RECOGNIZED_EXTENSIONS: frozenset[str] = frozenset(
    {
        # sources
        "c",
        "cpp",
        "cxx",
        "cs",
        "h",
        "hpp",
        "js",
        # markup
        "html",
        "css",
        "txt",
        "xml",
        "xaml",
        "aspx",
        "cshtml",
        # project resources
        "vsct",
        "resx",
        "vsixmanifest",
        "config",
        "snk",
        "settings",
        "targets",
        # images
        "jpg",
        "png",
        "ico",
    }
)


def is_recognized(name: str) -> bool:
    """Return ``True`` when the final dot-delimited token of ``name`` is allowlisted.

    Matching is exact and case-sensitive, so ``main.CPP`` is rejected.
    """

    tokens = name.split(".")
    if len(tokens) < 2:
        return False
    return tokens[-1] in RECOGNIZED_EXTENSIONS
