"""Unit tests for path resolution between source and working trees."""

from __future__ import annotations

from pathlib import Path

import pytest

from adoc_pages.paths import (
    is_confluence_include,
    is_non_prefixed_doc,
    is_promotable_doc,
    mirror_path,
    reference_path,
    reference_target_path,
    relative_reference,
)


def test_reference_path_normalizes_segments() -> None:
    resolved = reference_path(Path("/docs/guide/index.adoc"), "./../img/../img/a.png")
    assert resolved == Path("/docs/img/a.png"), f"unexpected path {resolved}"


def test_reference_target_path_mirrors_offset() -> None:
    target = reference_target_path(
        Path("/src/guide/index.adoc"),
        Path("/work/guide/index.adoc"),
        Path("/src/guide/chapters/one.adoc"),
    )
    assert target == Path("/work/guide/chapters/one.adoc")


def test_reference_target_path_follows_parent_offsets() -> None:
    """Offsets leaving the including directory are mirrored literally."""
    target = reference_target_path(
        Path("/src/guide/index.adoc"),
        Path("/work/index.adoc"),
        Path("/src/shared/common.adoc"),
    )
    assert target == Path("/shared/common.adoc")


def test_relative_reference_round_trips() -> None:
    original = Path("/src/guide/index.adoc")
    target = Path("/work/out/guide/index.adoc")
    resolved = reference_path(original, "../img/a.png")
    rewritten = relative_reference(target.parent, resolved)
    assert rewritten == "../../../src/img/a.png"
    assert reference_path(target, rewritten) == resolved, (
        "rewritten reference should resolve to the original file"
    )


def test_mirror_path_places_file_under_target_root() -> None:
    mirrored = mirror_path(Path("/src"), Path("/src/index.adoc"), Path("/work"))
    assert mirrored == Path("/work/index.adoc")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("index.adoc", True),
        ("_chapter.adoc", False),
        ("notes.txt", False),
        ("index.adoc.bak", False),
    ],
)
def test_is_non_prefixed_doc(name: str, expected: bool) -> None:
    assert is_non_prefixed_doc(Path(name)) is expected


def test_is_promotable_doc_requires_existing_file(tmp_path: Path) -> None:
    existing = tmp_path / "chapter.adoc"
    existing.write_text("= Chapter\n", encoding="utf-8")
    folder = tmp_path / "folder.adoc"
    folder.mkdir()
    assert is_promotable_doc(existing), "existing document should be promotable"
    assert not is_promotable_doc(tmp_path / "missing.adoc")
    assert not is_promotable_doc(folder), "directories are never promoted"


@pytest.mark.parametrize(
    ("attributes", "expected"),
    [
        ("confluence=include", True),
        ("leveloffset=+1,confluence=include", True),
        ("leveloffset=+1, confluence=include", False),
        ("confluence=exclude", False),
        ("confluence=include=yes", False),
        ("", False),
        (None, False),
    ],
)
def test_is_confluence_include(attributes: str | None, expected: bool) -> None:
    assert is_confluence_include(attributes) is expected
