"""Tests for the ``adoc-pages preprocess`` command."""

from __future__ import annotations

import logging
import typing as typ
from textwrap import dedent

import pytest

from adoc_pages.cli import _resolve_config, preprocess

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def docs(write_tree: typ.Callable[[dict[str, str]], Path]) -> Path:
    """Write a small documentation tree with one promoted chapter."""
    return write_tree(
        {
            "index.adoc": "= {product}\ninclude::chapter.adoc[]\n",
            "chapter.adoc": "= Chapter\nimage::missing.png[]\n",
        }
    )


def test_preprocess_prints_tree_and_written_files(
    docs: Path,
    working_root: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING)

    preprocess(
        source=docs / "index.adoc",
        working_dir=working_root,
        attribute=["product=Widget"],
    )

    out = capsys.readouterr().out.splitlines()
    assert out[:2] == ["- index.adoc", "  - chapter.adoc"], f"unexpected tree {out!r}"
    assert sum(line.startswith("wrote ") for line in out) == 2
    assert (working_root / "index.adoc").read_text(encoding="utf-8") == "= Widget\n\n"
    assert "since not available locally" in caplog.text, (
        "missing references should be logged as warnings"
    )


def test_preprocess_clean_removes_stale_files(docs: Path, working_root: Path) -> None:
    stale = working_root / "stale.adoc"
    stale.parent.mkdir(parents=True)
    stale.write_text("old", encoding="utf-8")

    preprocess(source=docs, working_dir=working_root, clean=True)

    assert not stale.exists(), "--clean should drop files from earlier runs"
    assert (working_root / "chapter.adoc").exists()


def test_preprocess_honours_skip(tmp_path: Path, docs: Path, working_root: Path) -> None:
    config_path = tmp_path / "adoc-pages.yaml"
    config_path.write_text(
        dedent(
            f"""
            source: {docs}
            working_dir: {working_root}
            skip: true
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )

    preprocess(config=config_path)

    assert not working_root.exists(), "skipped runs must not write anything"


def test_resolve_config_merges_overrides(tmp_path: Path, docs: Path) -> None:
    config_path = tmp_path / "adoc-pages.yaml"
    config_path.write_text(
        f"source: {docs}\nattributes:\n  product: Widget\n  version: '1'\n",
        encoding="utf-8",
    )

    settings = _resolve_config(
        config_path, None, tmp_path / "out", "latin-1", ["version=2"]
    )

    assert settings.source == docs
    assert settings.working_dir == tmp_path / "out"
    assert settings.source_encoding == "latin-1"
    assert settings.attributes == {"product": "Widget", "version": "2"}


def test_resolve_config_requires_source() -> None:
    with pytest.raises(ValueError, match="--config or --source"):
        _resolve_config(None, None, None, None, None)
