"""Utility helpers shared by the adoc-pages configuration loader."""

from __future__ import annotations

import codecs
import typing as typ
from pathlib import Path

from .models import PreprocessConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object, base_dir: Path) -> Path:
    """Return ``value`` as a path, anchored at ``base_dir`` when relative."""
    path = Path(str(value)).expanduser()
    return path if path.is_absolute() else base_dir / path


def _normalize_attributes(value: object | None) -> dict[str, str]:
    """Stringify an attribute mapping, treating null values as empty strings."""
    match value:
        case None:
            return {}
        case dict():
            mapping = typ.cast("dict[object, object]", value)
            return {
                str(key): "" if item is None else str(item)
                for key, item in mapping.items()
            }
        case _:
            msg = "'attributes' must be a mapping of names to values."
            raise PreprocessConfigError(msg)


def _validate_encoding(name: str) -> str:
    """Return ``name`` if Python knows the codec, otherwise raise."""
    try:
        codecs.lookup(name)
    except LookupError as exc:
        msg = f"Unknown source encoding '{name}'."
        raise PreprocessConfigError(msg) from exc
    return name


def parse_attribute_assignments(values: typ.Iterable[str]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` strings; a bare ``NAME`` maps to an empty value."""
    parsed: dict[str, str] = {}
    for item in values:
        name, _, value = item.partition("=")
        name = name.strip()
        if not name:
            msg = f"Invalid attribute assignment '{item}'. Expected NAME=VALUE."
            raise PreprocessConfigError(msg)
        parsed[name] = value
    return parsed


__all__ = [
    "_normalize_attributes",
    "_optional_str",
    "_resolve_path",
    "_validate_encoding",
    "parse_attribute_assignments",
]
