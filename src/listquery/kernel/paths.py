"""Dot-path field resolution over nested records."""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence
from typing import Any


@functools.lru_cache(maxsize=256)
def split_path(path: str) -> tuple[str, ...]:
    """Split ``"owner.contact"`` into ``("owner", "contact")``."""
    return tuple(path.split("."))


def resolve(record: Any, path: str) -> Any | None:
    """Return the value at *path* inside *record*, or ``None``.

    Walks mappings by key and lists/tuples by integer segment. The walk stops
    with ``None`` as soon as a segment is missing or the current value cannot
    be indexed; it never raises.
    """
    current = record
    for segment in split_path(path):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(segment)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not segment.isdigit() or int(segment) >= len(current):
                return None
            current = current[int(segment)]
        else:
            return None
    return current


__all__ = ["resolve", "split_path"]
