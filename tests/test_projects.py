"""Tests for directory-backed project trees."""

from __future__ import annotations

from pathlib import Path

import pytest

from tabnav.navigation.project_index import index_projects
from tabnav.services.projects import FileSystemNode, load_projects


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "demo"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.cpp").write_text("int main() {}\n", encoding="utf-8")
    (root / "src" / "main.h").write_text("#pragma once\n", encoding="utf-8")
    (root / "res.resx").mkdir()
    (root / "res.resx" / "strings.txt").write_text("hello\n", encoding="utf-8")
    (root / "README").write_text("docs\n", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    (root / ".hidden.txt").write_text("x\n", encoding="utf-8")
    return root


def test_children_sorted_with_directories_first(project_dir: Path) -> None:
    node = FileSystemNode(project_dir)

    assert [child.name for child in node.children] == ["res.resx", "src", "README"]


def test_files_have_no_children(project_dir: Path) -> None:
    assert FileSystemNode(project_dir / "README").children == ()


def test_index_includes_matching_directories(project_dir: Path) -> None:
    index = index_projects(load_projects([project_dir]))

    assert set(index.names()) == {"res.resx", "strings.txt", "main.cpp", "main.h"}
    assert FileSystemNode(project_dir.resolve() / "src" / "main.cpp") in index


def test_hidden_entries_are_skipped(project_dir: Path) -> None:
    index = index_projects(load_projects([project_dir]))

    assert "config" not in index.names()
    assert ".hidden.txt" not in index.names()


def test_relative_to_project_root(project_dir: Path) -> None:
    root = FileSystemNode(project_dir)
    leaf = FileSystemNode(project_dir / "src" / "main.h")

    assert leaf.relative_to(root) == "src/main.h"


def test_load_projects_rejects_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_projects([tmp_path / "missing"])
