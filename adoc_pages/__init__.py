"""Include-based page structure preprocessing for AsciiDoc sources.

This package resolves ``include::`` directives into a tree of pages and writes
rewritten copies of every involved document into a working directory, with
image, diagram, link, cross-reference, and ``:imagesdir:`` paths adjusted to
the new location. Rendering and publishing consume its output.

Exports
-------
- ``build_structure``: Build the pages structure and populate the working tree.
- ``IncludeBasedStructureProvider``: Validating provider behind ``build_structure``.
- ``Page`` / ``PagesStructure``: The produced page tree.
- ``app`` / ``main``: Cyclopts application entry for the ``adoc-pages`` command.

Examples
--------
>>> from pathlib import Path
>>> from adoc_pages import build_structure
>>> structure = build_structure(Path("docs"), Path("build/pages"))  # doctest: +SKIP
>>> len(structure.pages)  # doctest: +SKIP
1
"""

from __future__ import annotations

from .cli import app, main
from .models import Page, PagesStructure, StructureError
from .structure import IncludeBasedStructureProvider, build_structure

__all__ = [
    "IncludeBasedStructureProvider",
    "Page",
    "PagesStructure",
    "StructureError",
    "app",
    "build_structure",
    "main",
]
