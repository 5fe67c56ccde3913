#!/usr/bin/env python3
"""File Station path helpers."""

from typing import Tuple
from api.errors import ValidationError


def normalize_path(path: str) -> str:
    """Strip whitespace and trailing slashes and make the path absolute."""
    path = path.strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def split_path(path: str, field: str = "path") -> Tuple[str, str]:
    """Split ``/share/dir/name`` into (``/share/dir``, ``name``).

    Raises ValidationError when the path does not end in a name.
    """
    normalized = normalize_path(path)
    parent, _, name = normalized.rpartition("/")
    if not name:
        raise ValidationError(field, f"Invalid argument '{field}': path must end with a file or folder name")
    return parent or "/", name
