# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion and variant helpers for therapist argument parsing.

This module provides the built-in parse functions behind the value descriptors
(`bool_arg`, `path_arg`, `file_arg`, `dir_arg`, `date_arg`) and small helpers
shared by the descriptor model and the renderers.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_path / coerce_file / coerce_dir: Convert a string to a `Path`.
- coerce_date: Convert a string to a `datetime` using python-dateutil.
- split_variants: Normalise a comma separated variant string into a tuple.
- render_value: Format a value for help annotations.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from dateutil import parser as date_parser

TRUE_VALUES = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_VALUES = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the text is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    elif normalized in FALSE_VALUES:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_path(value: str) -> Path:
    """Convert a string to a `Path` without touching the filesystem."""
    if not value:
        raise ValueError("path must not be empty")
    return Path(value).expanduser()


def coerce_file(value: str) -> Path:
    """Convert a string to a `Path` that must name an existing file."""
    path = coerce_path(value)
    if not path.is_file():
        raise ValueError(f"'{value}' is not a file")
    return path


def coerce_dir(value: str) -> Path:
    """Convert a string to a `Path` that must name an existing directory."""
    path = coerce_path(value)
    if not path.is_dir():
        raise ValueError(f"'{value}' is not a directory")
    return path


def coerce_date(value: str) -> datetime:
    """Convert a string to a `datetime`."""
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"Value '{value}' could not be parsed as a date") from error


def split_variants(variants: str | Iterable[str]) -> tuple[str, ...]:
    """
    Normalise variants into a tuple of stripped strings.

    A single string is split on commas, so `"-c, --context"` and
    `["-c", "--context"]` are equivalent.
    """
    if isinstance(variants, str):
        parts = variants.split(",")
    else:
        parts = list(variants)
    return tuple(part.strip() for part in parts if part.strip())


def render_value(value: Any) -> str:
    """Format a value the way help annotations show it."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
