"""Load and validate preprocessing configuration YAML for adoc-pages runs.

This subpackage parses an ``adoc-pages.yaml`` file naming the AsciiDoc source,
the working directory, the source encoding, and the attribute values to
substitute, and produces a :class:`PreprocessConfig` ready to drive
:class:`~adoc_pages.structure.IncludeBasedStructureProvider`. The primary entry
point is :func:`load_preprocess_config`.

Examples
--------
>>> from pathlib import Path
>>> from adoc_pages.config import load_preprocess_config
>>> config = load_preprocess_config(Path("adoc-pages.yaml"))  # doctest: +SKIP
>>> config.source  # doctest: +SKIP
PosixPath('/project/docs')
"""

from .helpers import parse_attribute_assignments
from .loader import load_preprocess_config
from .models import PreprocessConfig, PreprocessConfigError

__all__ = [
    "PreprocessConfig",
    "PreprocessConfigError",
    "load_preprocess_config",
    "parse_attribute_assignments",
]
