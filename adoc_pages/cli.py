"""Cyclopts CLI entrypoint for preprocessing AsciiDoc sources into pages.

The ``adoc-pages`` console script defined here resolves the include graph of
an AsciiDoc document (or of every top-level document in a directory), writes
rewritten copies into a working directory, and prints the resulting page
tree so the renderer and publisher stages can consume it. Typical usage
involves running ``adoc-pages preprocess --config adoc-pages.yaml`` locally or
in CI before publishing.

Examples
--------
Preprocess a documentation folder with one attribute:

>>> from adoc_pages.cli import app
>>> app.run(
...     ["preprocess", "--source", "docs", "--attribute", "version=1.2"]
... )  # doctest: +SKIP

Preprocess using a configuration file:

>>> from adoc_pages.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    PreprocessConfig,
    load_preprocess_config,
    parse_attribute_assignments,
)
from .listener import LoggingStructureListener
from .models import format_structure
from .structure import IncludeBasedStructureProvider

LOGGER = logging.getLogger(__name__)

app = App(name="adoc-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(
    config: Path | None,
    source: Path | None,
    working_dir: Path | None,
    encoding: str | None,
    attribute: list[str] | None,
) -> PreprocessConfig:
    """Merge the optional configuration file with command-line overrides."""
    if config is not None:
        resolved = load_preprocess_config(config)
        if source is not None:
            resolved = dc.replace(resolved, source=source)
    elif source is not None:
        resolved = PreprocessConfig(source=source)
    else:
        msg = "Either --config or --source must be provided."
        raise ValueError(msg)

    if working_dir is not None:
        resolved = dc.replace(resolved, working_dir=working_dir)
    if encoding is not None:
        resolved = dc.replace(resolved, source_encoding=encoding)
    if attribute:
        merged = dict(resolved.attributes)
        merged.update(parse_attribute_assignments(attribute))
        resolved = dc.replace(resolved, attributes=merged)
    return resolved


@app.command(help="Resolve includes and write rewritten AsciiDoc pages.")
def preprocess(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to YAML config", env_var="INPUT_CONFIG")
    ] = None,
    source: typ.Annotated[
        Path | None,
        Parameter(help="AsciiDoc file or directory", env_var="INPUT_SOURCE"),
    ] = None,
    working_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the working directory", env_var="INPUT_WORKING_DIR"),
    ] = None,
    encoding: typ.Annotated[
        str | None, Parameter(help="Source encoding", env_var="INPUT_ENCODING")
    ] = None,
    attribute: typ.Annotated[
        list[str] | None, Parameter(help="Attribute as NAME=VALUE (repeatable)")
    ] = None,
    clean: typ.Annotated[
        bool, Parameter(help="Remove the working directory before writing")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Log every decision")] = False,
) -> None:
    """Preprocess AsciiDoc sources into a working tree of page documents.

    Parameters
    ----------
    config : Path or None, optional
        YAML configuration file; command-line values override its entries.
    source : Path or None, optional
        Root document or directory; required when ``config`` is omitted.
    working_dir : Path or None, optional
        Directory receiving rewritten documents.
    encoding : str or None, optional
        Encoding of the sources; defaults to UTF-8.
    attribute : list[str] or None, optional
        ``NAME=VALUE`` pairs substituted for ``{NAME}`` placeholders.
    clean : bool, optional
        Delete the working directory first so stale copies do not linger.
    verbose : bool, optional
        Log collection and rewriting decisions at debug level.

    Returns
    -------
    None
        Prints the page tree and the written paths.

    Raises
    ------
    ValueError
        If neither ``config`` nor ``source`` is provided.
    StructureError
        If the source tree cannot be processed.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = _resolve_config(config, source, working_dir, encoding, attribute)
    if settings.skip:
        LOGGER.info("skipping run as per configuration.")
        return

    if clean and settings.working_dir.is_dir():
        LOGGER.debug("Removing working directory %s", settings.working_dir)
        shutil.rmtree(settings.working_dir)

    provider = IncludeBasedStructureProvider(
        settings.source,
        settings.working_dir,
        attributes=settings.attributes,
        source_encoding=settings.source_encoding,
        listener=LoggingStructureListener(),
    )
    structure = provider.structure()
    for line in format_structure(structure, provider.working_dir):
        print(line)
    for path in provider.written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `adoc-pages` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
