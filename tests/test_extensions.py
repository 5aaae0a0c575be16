"""Tests for the project file extension allowlist."""

from __future__ import annotations

import pytest

from tabnav.navigation.extensions import RECOGNIZED_EXTENSIONS, is_recognized


@pytest.mark.parametrize("extension", sorted(RECOGNIZED_EXTENSIONS))
def test_every_allowlisted_extension_is_recognized(extension: str) -> None:
    assert is_recognized(f"module.{extension}")


@pytest.mark.parametrize("name", ["Makefile", "README", ""])
def test_names_without_dot_are_rejected(name: str) -> None:
    assert not is_recognized(name)


def test_extension_match_is_case_sensitive() -> None:
    assert is_recognized("main.cpp")
    assert not is_recognized("main.CPP")
    assert not is_recognized("Logo.PNG")


def test_only_final_token_is_considered() -> None:
    assert is_recognized("archive.tar.xml")
    assert not is_recognized("main.cpp.bak")
    assert not is_recognized("main.cpp.")


def test_dotfiles_use_their_suffix() -> None:
    assert is_recognized(".config")
    assert not is_recognized(".gitignore")


def test_unknown_extensions_are_rejected() -> None:
    assert not is_recognized("c.unknown")
    assert not is_recognized("script.py")
