r"""Reference grammars recognized when rewriting AsciiDoc sources.

Each :class:`PathDelimiter` describes one single-line reference syntax: a start
token, the token that terminates the referenced path, and the token that
closes the reference. The derived regular expression always exposes three
groups: the start token, the raw path, and the text between the terminator
and the end token (the attribute list for macros, the label for
cross-references).

Example
-------
>>> from adoc_pages.delimiters import IMAGE_BLOCK
>>> match = IMAGE_BLOCK.pattern.search("image::diagram.png[Diagram,200]")
>>> match.group(2), match.group(3)
('diagram.png', 'Diagram,200')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ


def _char_class(tokens: str) -> str:
    """Return a negated character class excluding every character of ``tokens``."""
    return f"[^{re.escape(tokens)}]" if tokens else "."


def _build_pattern(start: str, ref_end: str, end: str, *, inline: bool) -> re.Pattern[str]:
    """Compile the three-group pattern for a macro-style reference grammar."""
    anchor = "" if inline else "^"
    # `image:` must not match the `image::` block form.
    guard = f"(?!{re.escape(start[-1])})" if inline and start.endswith(":") else ""
    return re.compile(
        f"{anchor}({re.escape(start)}){guard}"
        f"({_char_class(ref_end)}*){re.escape(ref_end)}"
        f"({_char_class(end)}*){re.escape(end)}"
    )


@dc.dataclass(frozen=True, slots=True)
class PathDelimiter:
    """Immutable descriptor of one reference syntax.

    Attributes
    ----------
    name : str
        Identifier used in diagnostics.
    start : str
        Token that opens the reference; written back verbatim on rewrite.
    ref_end : str
        Token that terminates the referenced path.
    end : str
        Token that closes the reference.
    inline : bool
        Whether the reference may appear anywhere in a line rather than only
        at its start.
    pattern : re.Pattern[str]
        Compiled matcher with start, path, and trailing-text groups.
    """

    name: str
    start: str
    ref_end: str
    end: str
    inline: bool
    pattern: re.Pattern[str]

    @classmethod
    def macro(
        cls, name: str, start: str, ref_end: str, end: str, *, inline: bool = False
    ) -> PathDelimiter:
        """Build a delimiter whose pattern is derived from its tokens."""
        pattern = _build_pattern(start, ref_end, end, inline=inline)
        return cls(name, start, ref_end, end, inline, pattern)

    def render(self, path: str, trailing: str) -> str:
        """Reassemble a reference around a replacement ``path``."""
        return f"{self.start}{path}{self.ref_end}{trailing}{self.end}"


IMAGES_DIR = PathDelimiter(
    "images-directory",
    ":imagesdir: ",
    "",
    "",
    False,
    re.compile(r"^(:imagesdir:)(\s*\S+)(.*)$"),
)
INCLUDE = PathDelimiter.macro("include", "include::", "[", "]")
IMAGE_BLOCK = PathDelimiter.macro("image-block", "image::", "[", "]")
PLANTUML = PathDelimiter.macro("plantuml-block", "plantuml::", "[", "]")
INLINE_IMAGE = PathDelimiter.macro("inline-image", "image:", "[", "]", inline=True)
LINK = PathDelimiter.macro("link", "link:", "[", "]", inline=True)
CROSS_REFERENCE = PathDelimiter.macro(
    "cross-reference", "<<", "#,", ">>", inline=True
)

PATH_DELIMITERS: tuple[PathDelimiter, ...] = (
    IMAGES_DIR,
    INCLUDE,
    IMAGE_BLOCK,
    PLANTUML,
    INLINE_IMAGE,
    LINK,
    CROSS_REFERENCE,
)
"""Every grammar, in the order the rewriter applies them."""


def substitute_attributes(line: str, attributes: typ.Mapping[str, object]) -> str:
    """Replace ``{name}`` placeholders with the string form of their values.

    Attributes are applied one after another in mapping order; placeholders
    without an entry are left untouched.

    Examples
    --------
    >>> substitute_attributes("image::{imgs}/a.png[]", {"imgs": "img"})
    'image::img/a.png[]'
    >>> substitute_attributes("{unknown}", {})
    '{unknown}'
    """
    for name, value in attributes.items():
        line = line.replace(f"{{{name}}}", str(value))
    return line


__all__ = [
    "CROSS_REFERENCE",
    "IMAGES_DIR",
    "IMAGE_BLOCK",
    "INCLUDE",
    "INLINE_IMAGE",
    "LINK",
    "PATH_DELIMITERS",
    "PLANTUML",
    "PathDelimiter",
    "substitute_attributes",
]
