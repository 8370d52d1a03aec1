"""Behaviour tests for include promotion and reference rewriting.

The scenarios live in ``features/include_pages.feature``. Each one writes a
small AsciiDoc tree into a temporary directory, builds the pages structure
into a sibling working directory, and asserts on both the page tree and the
rewritten files.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_include_pages.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from adoc_pages.listener import NoOpStructureListener
from adoc_pages.structure import build_structure

if typ.TYPE_CHECKING:
    from adoc_pages.models import Page, PagesStructure

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "include_pages.feature"
)
scenarios(FEATURE_FILE)


class _RecordingListener(NoOpStructureListener):
    """Collect missing-path notifications."""

    def __init__(self) -> None:
        self.missing: list[str] = []

    def missing_path(self, path: str, *_args: object) -> None:  # type: ignore[override]
        self.missing.append(path)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write_sources(
    tmp_path: Path, scenario_state: dict[str, object], files: dict[str, str]
) -> None:
    source = tmp_path / "src"
    for relative, content in files.items():
        path = source / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    scenario_state["source"] = source
    scenario_state["working_dir"] = tmp_path / "work"


@given("a source tree with an index including a chapter with a diagram")
def given_chapter_tree(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    _write_sources(
        tmp_path,
        scenario_state,
        {
            "index.adoc": "= Index\ninclude::chapters/chapter1.adoc[]\n",
            "chapters/chapter1.adoc": "= Chapter 1\nimage::diagram.png[]\n",
            "chapters/diagram.png": "png",
        },
    )


@given("a source tree with an index including a marked appendix")
def given_marked_tree(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    _write_sources(
        tmp_path,
        scenario_state,
        {
            "index.adoc": "= Index\ninclude::_appendix.adoc[confluence=include]\n",
            "_appendix.adoc": "= Appendix\n",
        },
    )


@given("a source tree with an index referencing a missing image")
def given_missing_tree(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    _write_sources(
        tmp_path,
        scenario_state,
        {"index.adoc": "= Index\nSee image:missing.png[] here\n"},
    )


@when("I build the pages structure")
def when_build(scenario_state: dict[str, object]) -> None:
    listener = _RecordingListener()
    source = typ.cast("Path", scenario_state["source"])
    working_dir = typ.cast("Path", scenario_state["working_dir"])
    scenario_state["listener"] = listener
    scenario_state["structure"] = build_structure(
        source, working_dir, listener=listener
    )


def _rewritten(scenario_state: dict[str, object], name: str) -> str:
    working_dir = typ.cast("Path", scenario_state["working_dir"])
    return (working_dir / name).read_text(encoding="utf-8")


def _top_level(scenario_state: dict[str, object], name: str) -> Page:
    structure = typ.cast("PagesStructure", scenario_state["structure"])
    pages = [page for page in structure.pages if page.path.name == name]
    assert len(pages) == 1, f"expected exactly one top-level page named {name}"
    return pages[0]


@then(
    parsers.parse(
        'the structure has a top-level page "{name}" with child "{child}"'
    )
)
def then_child_page(scenario_state: dict[str, object], name: str, child: str) -> None:
    page = _top_level(scenario_state, name)
    children = [entry.path.name for entry in page.children]
    assert children == [child], f"expected child {child}, got {children!r}"


@then(parsers.parse('the structure has only the top-level page "{name}"'))
def then_single_top_level(scenario_state: dict[str, object], name: str) -> None:
    structure = typ.cast("PagesStructure", scenario_state["structure"])
    names = [page.path.name for page in structure.pages]
    assert names == [name], f"expected {name} as the only top-level page, got {names!r}"


@then(parsers.parse('the top-level page "{name}" has no children'))
def then_no_children(scenario_state: dict[str, object], name: str) -> None:
    page = _top_level(scenario_state, name)
    assert page.children == (), "marked includes must not become pages"


@then(parsers.parse('the rewritten "{name}" no longer contains the include'))
def then_include_removed(scenario_state: dict[str, object], name: str) -> None:
    text = _rewritten(scenario_state, name)
    assert "include::" not in text, f"include should be removed, got {text!r}"


@then(parsers.parse('the rewritten "{name}" contains "{expected}"'))
def then_contains(scenario_state: dict[str, object], name: str, expected: str) -> None:
    text = _rewritten(scenario_state, name)
    assert expected in text.splitlines(), f"expected line {expected!r} in {text!r}"


@then(parsers.parse('the missing reference "{path}" is reported once'))
def then_missing_reported(scenario_state: dict[str, object], path: str) -> None:
    listener = scenario_state["listener"]
    assert isinstance(listener, _RecordingListener)
    assert listener.missing == [path], f"unexpected missing reports {listener.missing!r}"
