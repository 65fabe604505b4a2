"""Application query – single-key stable sort with nulls last."""
from __future__ import annotations

import dataclasses
import functools
from enum import Enum
from typing import Any, Iterable

from listquery.application.query.coercion import relate
from listquery.kernel.paths import resolve


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Sort criterion; ``key=None`` keeps the filtered order."""

    key: str | None = None
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection(self.direction))

    def toggled(self, key: str) -> "SortSpec":
        """Same key flips the direction, a new key starts ascending."""
        if key == self.key:
            return SortSpec(key, self.direction.flipped())
        return SortSpec(key, SortDirection.ASC)

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "direction": self.direction.value}


def compare(a: Any, b: Any, sort: SortSpec) -> int:
    """Three-way comparison of two records under *sort*.

    Missing values go last whatever the direction; ``desc`` only negates the
    comparison of two present values. Values without a mutual ordering
    compare equal.
    """
    if sort.key is None:
        return 0
    a_value = resolve(a, sort.key)
    b_value = resolve(b, sort.key)
    if a_value is None and b_value is None:
        return 0
    if a_value is None:
        return 1
    if b_value is None:
        return -1
    result = relate(a_value, b_value) or 0
    return -result if sort.direction == SortDirection.DESC else result


def sort_records(records: Iterable[Any], sort: SortSpec) -> list[Any]:
    """Return a new, stably sorted list; the input order breaks ties."""
    if sort.key is None:
        return list(records)
    return sorted(records, key=functools.cmp_to_key(lambda a, b: compare(a, b, sort)))


__all__ = ["SortDirection", "SortSpec", "compare", "sort_records"]
