"""Typed dataclasses describing an adoc-pages preprocessing run."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_SOURCE_ENCODING, DEFAULT_WORKING_DIR


class PreprocessConfigError(ValueError):
    """Raised when the preprocessing configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PreprocessConfig:
    """A fully resolved preprocessing run sourced from YAML config or flags.

    Attributes
    ----------
    source : Path
        Root document or directory of top-level documents.
    working_dir : Path
        Directory receiving the rewritten documents.
    source_encoding : str
        Encoding used to read sources and write the rewritten copies.
    attributes : dict[str, str]
        Values substituted for ``{name}`` placeholders.
    skip : bool
        When true the run is skipped entirely.
    """

    source: Path
    working_dir: Path = Path(DEFAULT_WORKING_DIR)
    source_encoding: str = DEFAULT_SOURCE_ENCODING
    attributes: dict[str, str] = dc.field(default_factory=dict)
    skip: bool = False


__all__ = ["PreprocessConfig", "PreprocessConfigError"]
