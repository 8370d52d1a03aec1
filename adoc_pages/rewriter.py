"""Rewrite collected documents into the working tree.

For every document in a source-to-target mapping, :class:`LineRewriter`
re-reads the source, substitutes attributes, and adjusts each reference found
by the grammars in :data:`~adoc_pages.delimiters.PATH_DELIMITERS`:

* references to files missing on disk are kept verbatim;
* references to documents that were promoted to pages are removed, since
  their content is published on its own page;
* every other reference is re-pointed at the original on-disk file, relative
  to the directory of the rewritten copy.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .collector import read_lines
from .delimiters import PATH_DELIMITERS, substitute_attributes
from .listener import NoOpStructureListener
from .models import StructureError
from .paths import reference_path, relative_reference

if typ.TYPE_CHECKING:
    import re

    from .delimiters import PathDelimiter
    from .listener import StructureListener


class LineRewriter:
    """Write rewritten copies of mapped documents."""

    def __init__(
        self,
        attributes: typ.Mapping[str, object],
        encoding: str,
        listener: StructureListener | None = None,
        delimiters: typ.Sequence[PathDelimiter] = PATH_DELIMITERS,
    ) -> None:
        self.attributes = attributes
        self.encoding = encoding
        self.listener = listener or NoOpStructureListener()
        self.delimiters = tuple(delimiters)

    def write_all(
        self,
        mapping: typ.Mapping[Path, Path],
        skip: typ.Container[Path] = frozenset(),
    ) -> list[Path]:
        """Rewrite every mapped document, in mapping order.

        Parameters
        ----------
        mapping : Mapping[Path, Path]
            Complete source-to-target mapping of one top-level document.
        skip : Container[Path], optional
            Target files already produced earlier in the run; they are not
            written again.

        Returns
        -------
        list[Path]
            Target files written, one per mapping entry.

        Raises
        ------
        StructureError
            If a source cannot be read or a target cannot be written.
        """
        written: list[Path] = []
        for file, target_file in mapping.items():
            if target_file in skip:
                continue
            self.listener.process_include(file, target_file)
            lines = [
                self.rewrite_line(
                    substitute_attributes(line, self.attributes),
                    file,
                    target_file,
                    mapping,
                )
                for line in read_lines(file, self.encoding)
            ]
            self._write(target_file, lines)
            written.append(target_file)
        return written

    def rewrite_line(
        self,
        line: str,
        file: Path,
        target_file: Path,
        mapping: typ.Mapping[Path, Path],
    ) -> str:
        """Apply every grammar to ``line`` in order and return the result."""
        for delimiter in self.delimiters:

            def _replace(
                match: re.Match[str], delimiter: PathDelimiter = delimiter
            ) -> str:
                return self._rewrite_reference(
                    match, delimiter, file, target_file, mapping
                )

            line = delimiter.pattern.sub(_replace, line)
        return line

    def _rewrite_reference(
        self,
        match: re.Match[str],
        delimiter: PathDelimiter,
        file: Path,
        target_file: Path,
        mapping: typ.Mapping[Path, Path],
    ) -> str:
        path = match.group(2).strip()
        actual_path = reference_path(file, path)
        if not actual_path.exists():
            self.listener.missing_path(path, actual_path, file, target_file, delimiter)
            return match.group(0)

        # Promoted documents are dropped; their page carries the content.
        mapped = mapping.get(actual_path)
        result = relative_reference(target_file.parent, mapped or actual_path)
        self.listener.change_path(
            path, actual_path, Path(result), file, target_file, delimiter
        )
        if mapped is not None:
            return ""
        return delimiter.render(result, match.group(3))

    def _write(self, target_file: Path, lines: list[str]) -> None:
        try:
            target_file.parent.mkdir(parents=True, exist_ok=True)
            with target_file.open("w", encoding=self.encoding, newline="\n") as handle:
                for line in lines:
                    handle.write(f"{line}\n")
        except (OSError, UnicodeError, LookupError) as exc:
            msg = f"Unable to write file {target_file}"
            raise StructureError(msg) from exc


__all__ = ["LineRewriter"]
