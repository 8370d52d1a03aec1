"""Include-based pages structure for an AsciiDoc source tree.

:class:`IncludeBasedStructureProvider` turns a single document, or the
top-level documents of a directory, into a :class:`PagesStructure`. Each
top-level document is handled in two passes: the :class:`IncludeCollector`
discovers its promoted includes and maps every involved file into the working
directory, then the :class:`LineRewriter` writes the rewritten copies.

Example
-------
>>> from pathlib import Path
>>> from adoc_pages.structure import build_structure
>>> structure = build_structure(
...     Path("docs"), Path("build/preprocessed"), {"version": "1.0"}
... )  # doctest: +SKIP
>>> [page.path.name for page in structure.pages]  # doctest: +SKIP
['index.adoc']
"""

from __future__ import annotations

import codecs
import os
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_SOURCE_ENCODING
from .collector import IncludeCollector
from .listener import NoOpStructureListener
from .models import Page, PagesStructure, StructureError
from .paths import is_non_prefixed_doc, mirror_path
from .rewriter import LineRewriter

if typ.TYPE_CHECKING:
    from .listener import StructureListener


def _absolute(path: Path) -> Path:
    return Path(os.path.normpath(path.absolute()))


class IncludeBasedStructureProvider:
    """Build pages from include directives and populate the working tree."""

    def __init__(
        self,
        source: Path,
        working_dir: Path,
        attributes: typ.Mapping[str, object] | None = None,
        source_encoding: str = DEFAULT_SOURCE_ENCODING,
        listener: StructureListener | None = None,
    ) -> None:
        """Validate the source and working locations.

        Parameters
        ----------
        source : Path
            A directory of top-level documents or a single ``.adoc`` file that
            does not start with the include prefix.
        working_dir : Path
            Root of the working tree receiving the rewritten documents.
        attributes : Mapping[str, object], optional
            Values substituted for ``{name}`` placeholders before references
            are matched.
        source_encoding : str, optional
            Encoding used to read sources and write rewritten copies.
        listener : StructureListener, optional
            Observer notified of each decision; defaults to a no-op listener.

        Raises
        ------
        StructureError
            If ``source`` is missing or unsupported, ``working_dir`` exists
            and is not a directory, or ``source_encoding`` is not a known
            codec.
        """
        if not source.exists():
            msg = f"Source not found: {source}"
            raise StructureError(msg)
        if not (source.is_dir() or is_non_prefixed_doc(source)):
            msg = f"Invalid source {source}. Must be a directory or adoc file."
            raise StructureError(msg)
        if working_dir.exists() and not working_dir.is_dir():
            msg = f"Working directory is not a directory: {working_dir}"
            raise StructureError(msg)
        try:
            codecs.lookup(source_encoding)
        except LookupError as exc:
            msg = f"Unknown source encoding: {source_encoding}"
            raise StructureError(msg) from exc

        self.source = _absolute(source)
        self.working_dir = _absolute(working_dir)
        self.attributes = dict(attributes or {})
        self.source_encoding = source_encoding
        self.listener = listener or NoOpStructureListener()
        self.collector = IncludeCollector(
            self.attributes, source_encoding, listener=self.listener
        )
        self.rewriter = LineRewriter(
            self.attributes, source_encoding, listener=self.listener
        )
        self.written: list[Path] = []
        self._structure: PagesStructure | None = None

    def structure(self) -> PagesStructure:
        """Return the pages structure, building the working tree on first use."""
        if self._structure is None:
            self._structure = self._build_structure()
        return self._structure

    def top_level_documents(self) -> list[tuple[Path, Path]]:
        """Return ``(source, target)`` pairs for every top-level document."""
        if not self.source.is_dir():
            return [(self.source, self.working_dir / self.source.name)]

        self.listener.process_directory(self.source)
        try:
            entries = sorted(self.source.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            msg = f"Unable to list directory {self.source}"
            raise StructureError(msg) from exc
        return [
            (entry, mirror_path(self.source, entry, self.working_dir))
            for entry in entries
            if is_non_prefixed_doc(entry) and entry.is_file()
        ]

    def _build_structure(self) -> PagesStructure:
        pages = [
            self._build_page(file, target_file)
            for file, target_file in self.top_level_documents()
        ]
        return PagesStructure(tuple(pages))

    def _build_page(self, file: Path, target_file: Path) -> Page:
        mapping: dict[Path, Path] = {}
        page = self.collector.collect(file, target_file, mapping)
        # Documents shared by several top-level trees are written once.
        self.written.extend(self.rewriter.write_all(mapping, skip=set(self.written)))
        return page


def build_structure(
    source: Path,
    working_dir: Path,
    attributes: typ.Mapping[str, object] | None = None,
    source_encoding: str = DEFAULT_SOURCE_ENCODING,
    listener: StructureListener | None = None,
) -> PagesStructure:
    """Build the pages structure for ``source`` into ``working_dir``.

    Convenience wrapper around :class:`IncludeBasedStructureProvider`; see its
    constructor for parameters and raised errors.
    """
    provider = IncludeBasedStructureProvider(
        source,
        working_dir,
        attributes=attributes,
        source_encoding=source_encoding,
        listener=listener,
    )
    return provider.structure()


__all__ = ["IncludeBasedStructureProvider", "build_structure"]
