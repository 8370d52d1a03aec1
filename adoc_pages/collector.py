"""Discover the page tree spanned by ``include::`` directives.

:class:`IncludeCollector` walks a document depth-first, following only the
include grammar. Each include of an existing, non-prefixed ``.adoc`` file
without the ``confluence=include`` marker becomes a child :class:`Page`; all
other includes stay inline. Along the way it fills the source-to-target
mapping that the rewriter consumes afterwards.

The walk uses an explicit stack rather than recursion, and a document is
mapped before its own includes are read, so a document that includes itself
(directly or through others) is scanned once. Including an already mapped
document again adds a leaf page for its existing target without descending.

Example
-------
>>> from pathlib import Path
>>> collector = IncludeCollector({}, "utf-8")
>>> mapping: dict[Path, Path] = {}
>>> page = collector.collect(
...     Path("/src/index.adoc"), Path("/work/index.adoc"), mapping
... )  # doctest: +SKIP
>>> [child.path for child in page.children]  # doctest: +SKIP
[PosixPath('/work/chapter.adoc')]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .delimiters import INCLUDE, substitute_attributes
from .listener import NoOpStructureListener
from .models import Page, StructureError
from .paths import (
    is_confluence_include,
    is_promotable_doc,
    reference_path,
    reference_target_path,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .listener import StructureListener


def read_lines(path: Path, encoding: str) -> list[str]:
    """Return the lines of ``path`` without line terminators.

    Raises
    ------
    StructureError
        If the file cannot be read or decoded with ``encoding``.
    """
    try:
        with path.open("r", encoding=encoding) as handle:
            return [line.rstrip("\n") for line in handle]
    except (OSError, UnicodeError, LookupError) as exc:
        msg = f"Unable to read file {path}"
        raise StructureError(msg) from exc


@dc.dataclass(slots=True, frozen=True)
class _Include:
    """One ``include::`` directive found while scanning a document."""

    path: str
    attributes: str
    actual_path: Path
    target_path: Path
    file: Path
    target_file: Path


@dc.dataclass(slots=True)
class _Draft:
    """Mutable page under construction; frozen into a :class:`Page` at the end."""

    path: Path
    children: list[_Draft] = dc.field(default_factory=list)


def _freeze(drafts: list[_Draft]) -> Page:
    """Return the frozen page of ``drafts[0]``.

    ``drafts`` lists every draft in creation order, so each child comes after
    its parent and is frozen first when walking the list backwards.
    """
    pages: dict[int, Page] = {}
    for draft in reversed(drafts):
        pages[id(draft)] = Page(
            draft.path, tuple(pages[id(child)] for child in draft.children)
        )
    return pages[id(drafts[0])]


class IncludeCollector:
    """Build pages and the source-to-target mapping from include directives."""

    def __init__(
        self,
        attributes: typ.Mapping[str, object],
        encoding: str,
        listener: StructureListener | None = None,
    ) -> None:
        self.attributes = attributes
        self.encoding = encoding
        self.listener = listener or NoOpStructureListener()

    def collect(self, file: Path, target_file: Path, mapping: dict[Path, Path]) -> Page:
        """Collect the page tree rooted at ``file``.

        Parameters
        ----------
        file : Path
            Absolute, normalized path of the source document.
        target_file : Path
            Where the rewritten copy of ``file`` will be written.
        mapping : dict[Path, Path]
            Source-to-target mapping, extended in place with ``file`` and every
            promoted document reachable from it, in discovery order.

        Returns
        -------
        Page
            Page for ``file`` whose children are the promoted includes.

        Raises
        ------
        StructureError
            If any document in the include tree cannot be read.
        """
        if file in mapping:
            return Page(mapping[file])
        root = self._visit(file, target_file, mapping)
        drafts = [root]
        stack: list[tuple[_Draft, typ.Iterator[_Include]]] = [
            (root, iter(self._scan(file, target_file)))
        ]
        while stack:
            draft, pending = stack[-1]
            include = next(pending, None)
            if include is None:
                stack.pop()
                continue
            child, descend = self._follow(include, mapping)
            if child is None:
                continue
            draft.children.append(child)
            drafts.append(child)
            if descend:
                stack.append(
                    (child, iter(self._scan(include.actual_path, include.target_path)))
                )
        return _freeze(drafts)

    def _visit(
        self, file: Path, target_file: Path, mapping: dict[Path, Path]
    ) -> _Draft:
        self.listener.process_file(file, target_file)
        mapping[file] = target_file
        return _Draft(target_file)

    def _scan(self, file: Path, target_file: Path) -> list[_Include]:
        """Return every include directive of ``file`` in line order."""
        includes: list[_Include] = []
        for raw in read_lines(file, self.encoding):
            line = substitute_attributes(raw, self.attributes)
            match = INCLUDE.pattern.search(line)
            if match is None:
                continue
            path = match.group(2).strip()
            actual_path = reference_path(file, path)
            includes.append(
                _Include(
                    path=path,
                    attributes=match.group(3),
                    actual_path=actual_path,
                    target_path=reference_target_path(file, target_file, actual_path),
                    file=file,
                    target_file=target_file,
                )
            )
        return includes

    def _follow(
        self, include: _Include, mapping: dict[Path, Path]
    ) -> tuple[_Draft | None, bool]:
        """Return the child page for ``include`` and whether to scan it.

        Inline includes yield ``(None, False)``. A document that is already
        mapped yields a leaf page for its existing target that is not scanned
        again, which stops include cycles.
        """
        if is_confluence_include(include.attributes) or not is_promotable_doc(
            include.actual_path
        ):
            self.listener.reject_include(
                include.path, include.actual_path, include.file, include.target_file
            )
            return None, False
        if include.actual_path in mapping:
            self.listener.revisit_include(
                include.path, include.actual_path, include.file, include.target_file
            )
            return _Draft(mapping[include.actual_path]), False
        self.listener.collect_include(
            include.path,
            include.actual_path,
            include.target_path,
            include.file,
            include.target_file,
        )
        return self._visit(include.actual_path, include.target_path, mapping), True


__all__ = ["IncludeCollector", "read_lines"]
