"""Observer hooks fired while the pages structure is built.

Listeners only observe: return values are ignored and nothing they do feeds
back into collection or rewriting. :class:`NoOpStructureListener` is used when
no listener is supplied; :class:`LoggingStructureListener` reports each hook
through :mod:`logging` and is what the ``adoc-pages`` command installs.
"""

from __future__ import annotations

import logging
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .delimiters import PathDelimiter

LOGGER = logging.getLogger(__name__)


class StructureListener(typ.Protocol):
    """Callbacks invoked at each decision point of a structure build."""

    def process_directory(self, directory: Path) -> None:
        """Enumerate top-level documents of ``directory``."""

    def process_file(self, file: Path, target_file: Path) -> None:
        """Collect includes of ``file``, which will be written to ``target_file``."""

    def collect_include(
        self,
        path: str,
        actual_path: Path,
        result_path: Path,
        file: Path,
        target_file: Path,
    ) -> None:
        """Promote the include ``path`` found in ``file`` to a child page."""

    def reject_include(
        self, path: str, actual_path: Path, file: Path, target_file: Path
    ) -> None:
        """Leave the include ``path`` found in ``file`` inline."""

    def revisit_include(
        self, path: str, actual_path: Path, file: Path, target_file: Path
    ) -> None:
        """Reuse the page of an include whose document is already mapped."""

    def process_include(self, file: Path, target_file: Path) -> None:
        """Rewrite ``file`` into ``target_file``."""

    def change_path(
        self,
        path: str,
        actual_path: Path,
        result_path: Path,
        file: Path,
        target_file: Path,
        delimiter: PathDelimiter,
    ) -> None:
        """Point a reference at ``result_path`` (or drop a promoted include)."""

    def missing_path(
        self,
        path: str,
        actual_path: Path,
        file: Path,
        target_file: Path,
        delimiter: PathDelimiter,
    ) -> None:
        """Keep a reference whose ``actual_path`` does not exist on disk."""


class NoOpStructureListener:
    """Listener that ignores every notification."""

    def process_directory(self, directory: Path) -> None:
        pass

    def process_file(self, file: Path, target_file: Path) -> None:
        pass

    def collect_include(
        self,
        path: str,
        actual_path: Path,
        result_path: Path,
        file: Path,
        target_file: Path,
    ) -> None:
        pass

    def reject_include(
        self, path: str, actual_path: Path, file: Path, target_file: Path
    ) -> None:
        pass

    def revisit_include(
        self, path: str, actual_path: Path, file: Path, target_file: Path
    ) -> None:
        pass

    def process_include(self, file: Path, target_file: Path) -> None:
        pass

    def change_path(
        self,
        path: str,
        actual_path: Path,
        result_path: Path,
        file: Path,
        target_file: Path,
        delimiter: PathDelimiter,
    ) -> None:
        pass

    def missing_path(
        self,
        path: str,
        actual_path: Path,
        file: Path,
        target_file: Path,
        delimiter: PathDelimiter,
    ) -> None:
        pass


class LoggingStructureListener(NoOpStructureListener):
    """Report structure decisions to a :class:`logging.Logger`.

    Everything is logged at ``DEBUG`` except references that cannot be found
    locally, which are logged at ``WARNING`` because they end up unchanged in
    the rewritten output.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER

    def process_directory(self, directory: Path) -> None:
        self.logger.debug("Processing directory %s", directory)

    def process_file(self, file: Path, target_file: Path) -> None:
        self.logger.debug("Processing file %s", file)

    def collect_include(
        self,
        path: str,
        actual_path: Path,
        result_path: Path,
        file: Path,
        target_file: Path,
    ) -> None:
        self.logger.debug("Mapping 'include::%s' in %s to %s", path, file, result_path)

    def reject_include(
        self, path: str, actual_path: Path, file: Path, target_file: Path
    ) -> None:
        self.logger.debug(
            "Include reference 'include::%s' in %s will not receive a separate page",
            path,
            file,
        )

    def revisit_include(
        self, path: str, actual_path: Path, file: Path, target_file: Path
    ) -> None:
        self.logger.debug(
            "Include reference 'include::%s' in %s already has a page at %s",
            path,
            file,
            actual_path,
        )

    def process_include(self, file: Path, target_file: Path) -> None:
        self.logger.debug("Processing (include) page %s", file)

    def change_path(
        self,
        path: str,
        actual_path: Path,
        result_path: Path,
        file: Path,
        target_file: Path,
        delimiter: PathDelimiter,
    ) -> None:
        self.logger.debug(
            "Changing path '%s%s' in %s to refer to %s",
            delimiter.start,
            path,
            file,
            result_path,
        )

    def missing_path(
        self,
        path: str,
        actual_path: Path,
        file: Path,
        target_file: Path,
        delimiter: PathDelimiter,
    ) -> None:
        self.logger.warning(
            "Ignoring path '%s%s' in %s since not available locally: %s",
            delimiter.start,
            path,
            file,
            actual_path,
        )


__all__ = ["LoggingStructureListener", "NoOpStructureListener", "StructureListener"]
