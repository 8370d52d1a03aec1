"""Load preprocessing configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_SOURCE_ENCODING, DEFAULT_WORKING_DIR
from .helpers import (
    _normalize_attributes,
    _optional_str,
    _resolve_path,
    _validate_encoding,
)
from .models import PreprocessConfig, PreprocessConfigError


def load_preprocess_config(path: Path) -> PreprocessConfig:
    """Load the YAML configuration describing a preprocessing run.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``adoc-pages.yaml``). Relative ``source`` and ``working_dir`` values
        are resolved against the directory containing this file.

    Returns
    -------
    PreprocessConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    PreprocessConfigError
        If ``source`` is missing or a value has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from adoc_pages.config import load_preprocess_config
    >>> config = load_preprocess_config(Path("adoc-pages.yaml"))  # doctest: +SKIP
    >>> config.source_encoding  # doctest: +SKIP
    'utf-8'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    source = _optional_str(raw.get("source"))
    if not source:
        msg = "No 'source' defined in preprocessing configuration."
        raise PreprocessConfigError(msg)
    working_dir = _optional_str(raw.get("working_dir")) or DEFAULT_WORKING_DIR
    encoding = _optional_str(raw.get("source_encoding")) or DEFAULT_SOURCE_ENCODING

    skip = raw.get("skip", False)
    if not isinstance(skip, bool):
        msg = "'skip' must be a boolean."
        raise PreprocessConfigError(msg)

    return PreprocessConfig(
        source=_resolve_path(source, base_dir),
        working_dir=_resolve_path(working_dir, base_dir),
        source_encoding=_validate_encoding(encoding),
        attributes=_normalize_attributes(raw.get("attributes")),
        skip=skip,
    )


__all__ = ["load_preprocess_config"]
