"""Page structure dataclasses produced by the include-based provider."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class StructureError(ValueError):
    """Raised when a pages structure cannot be built from the source tree."""


@dc.dataclass(slots=True, frozen=True)
class Page:
    """A document that becomes an independent page downstream.

    Attributes
    ----------
    path : Path
        Absolute location of the rewritten document in the working tree.
    children : tuple[Page, ...]
        Pages promoted from ``include::`` directives, in line order. A
        document included again below the same top-level page appears as a
        leaf page pointing at its existing target.
    """

    path: Path
    children: tuple[Page, ...] = ()

    def walk(self, depth: int = 0) -> typ.Iterator[tuple[int, Page]]:
        """Yield ``(depth, page)`` for this page and its descendants, pre-order."""
        pending: list[tuple[int, Page]] = [(depth, self)]
        while pending:
            level, page = pending.pop()
            yield level, page
            pending.extend((level + 1, child) for child in reversed(page.children))


@dc.dataclass(slots=True, frozen=True)
class PagesStructure:
    """Ordered top-level pages, one per top-level source document."""

    pages: tuple[Page, ...]

    def walk(self) -> typ.Iterator[tuple[int, Page]]:
        """Yield ``(depth, page)`` over every page of every top-level tree."""
        for page in self.pages:
            yield from page.walk()


def format_structure(structure: PagesStructure, root: Path) -> list[str]:
    """Render the structure as indented lines with paths relative to ``root``."""
    lines: list[str] = []
    for depth, page in structure.walk():
        try:
            label = page.path.relative_to(root).as_posix()
        except ValueError:  # pragma: no cover - page outside working tree
            label = page.path.as_posix()
        lines.append(f"{'  ' * depth}- {label}")
    return lines


__all__ = ["Page", "PagesStructure", "StructureError", "format_structure"]
