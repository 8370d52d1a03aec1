"""Path algebra between the source tree and the working tree.

All helpers are pure: they never touch the filesystem except where the name
says so (:func:`is_promotable_doc`). Normalization is lexical, matching how
AsciiDoc resolves ``include::`` targets relative to the including file.
"""

from __future__ import annotations

import os
from pathlib import Path

from ._constants import (
    CONFLUENCE_ATTRIBUTE,
    CONFLUENCE_INCLUDE_VALUE,
    DOC_EXTENSION,
    DOC_INCLUDE_PREFIX,
    INCLUDE_ATTRIBUTES_ASSIGN,
    INCLUDE_ATTRIBUTES_SEPARATOR,
)


def _normalize(path: Path | str) -> Path:
    return Path(os.path.normpath(path))


def reference_path(file: Path, reference: str) -> Path:
    """Return the normalized path ``reference`` denotes from inside ``file``.

    Examples
    --------
    >>> reference_path(Path("/docs/guide/index.adoc"), "../img/./a.png").as_posix()
    '/docs/img/a.png'
    """
    return _normalize(file.parent / reference)


def reference_target_path(file: Path, target_file: Path, referenced: Path) -> Path:
    """Mirror the offset from ``file`` to ``referenced`` onto ``target_file``.

    The referenced document keeps the same relative placement next to the
    rewritten copy of ``file`` that it had next to the original.

    Examples
    --------
    >>> reference_target_path(
    ...     Path("/src/index.adoc"),
    ...     Path("/work/index.adoc"),
    ...     Path("/src/chapters/one.adoc"),
    ... ).as_posix()
    '/work/chapters/one.adoc'
    """
    offset = os.path.relpath(referenced, file.parent)
    return _normalize(target_file.parent / offset)


def relative_reference(from_dir: Path, to_path: Path) -> str:
    """Return the POSIX relative path leading from ``from_dir`` to ``to_path``.

    Examples
    --------
    >>> relative_reference(Path("/work/guide"), Path("/src/img/a.png"))
    '../../src/img/a.png'
    """
    return Path(os.path.relpath(to_path, from_dir)).as_posix()


def mirror_path(root: Path, path: Path, target_root: Path) -> Path:
    """Place ``path`` under ``target_root`` at its offset from ``root``."""
    return _normalize(target_root / path.relative_to(root))


def is_non_prefixed_doc(path: Path) -> bool:
    """Return whether ``path`` names a document that may become its own page.

    Examples
    --------
    >>> is_non_prefixed_doc(Path("chapter.adoc")), is_non_prefixed_doc(Path("_part.adoc"))
    (True, False)
    """
    name = path.name
    return name.endswith(DOC_EXTENSION) and not name.startswith(DOC_INCLUDE_PREFIX)


def is_promotable_doc(path: Path) -> bool:
    """Return whether ``path`` is an existing, non-prefixed document file."""
    return is_non_prefixed_doc(path) and path.is_file()


def is_confluence_include(attributes: str | None) -> bool:
    """Return whether an include attribute list carries ``confluence=include``.

    Examples
    --------
    >>> is_confluence_include("leveloffset=+1,confluence=include")
    True
    >>> is_confluence_include("confluence=include=x")
    False
    """
    if not attributes:
        return False
    for attribute in attributes.split(INCLUDE_ATTRIBUTES_SEPARATOR):
        parts = attribute.split(INCLUDE_ATTRIBUTES_ASSIGN)
        if parts == [CONFLUENCE_ATTRIBUTE, CONFLUENCE_INCLUDE_VALUE]:
            return True
    return False


__all__ = [
    "is_confluence_include",
    "is_non_prefixed_doc",
    "is_promotable_doc",
    "mirror_path",
    "reference_path",
    "reference_target_path",
    "relative_reference",
]
