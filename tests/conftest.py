"""Shared fixtures for building throwaway AsciiDoc source trees."""

from __future__ import annotations

import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

WriteTree = typ.Callable[[dict[str, str]], "Path"]


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """Return the directory that holds the source documents for a test."""
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def working_root(tmp_path: Path) -> Path:
    """Return the (not yet created) working directory for a test."""
    return tmp_path / "work"


@pytest.fixture
def write_tree(source_root: Path) -> WriteTree:
    """Return a helper that writes ``{relative path: content}`` under the source root."""

    def _write(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            path = source_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return source_root

    return _write
