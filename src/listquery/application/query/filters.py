"""Application query – tagged filter values and their classification.

List pages hand the engine loosely shaped values (strings from ``<select>``
controls, lists, ``{"min": .., "max": ..}`` mappings, booleans). They are
classified into one of the tagged variants below exactly once, when the filter
is set, so evaluation dispatches on the variant and never on the filter key.

Named keys with fixed meaning::

    owner_id="null"            -> SentinelNull("owner_id")
    yearFrom / yearTo          -> Range("year", min=.. / max=..)
    contact_filter             -> ExistsCheck("contact", ...)
    paid_at_exists             -> ExistsCheck("paid_at", ...)
    vehicle_count_filter       -> PassThrough (enforced by the caller)
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Union

from listquery.application.query.coercion import as_number, loose_equals, relate, strict_equals
from listquery.kernel.paths import resolve
from listquery.kernel.specification import BaseSpecification

Record = Mapping[str, Any]

SENTINEL_NULL = "null"


@dataclasses.dataclass(frozen=True)
class Scalar(BaseSpecification[Record]):
    """Field equals *value*; a numeric field also matches its string form."""

    path: str
    value: Any

    def is_satisfied_by(self, candidate: Record) -> bool:
        return loose_equals(resolve(candidate, self.path), self.value)


@dataclasses.dataclass(frozen=True)
class Membership(BaseSpecification[Record]):
    """Field equals one of *values*."""

    path: str
    values: tuple[Any, ...]

    def is_satisfied_by(self, candidate: Record) -> bool:
        item_value = resolve(candidate, self.path)
        return any(strict_equals(item_value, v) for v in self.values)


@dataclasses.dataclass(frozen=True)
class Range(BaseSpecification[Record]):
    """Inclusive ``min <= field <= max``; a ``None`` bound is open."""

    path: str
    min: Any = None
    max: Any = None

    def is_satisfied_by(self, candidate: Record) -> bool:
        item_value = resolve(candidate, self.path)
        if item_value is None:
            return False
        if self.min is not None:
            order = relate(item_value, self.min)
            if order is None or order < 0:
                return False
        if self.max is not None:
            order = relate(item_value, self.max)
            if order is None or order > 0:
                return False
        return True


@dataclasses.dataclass(frozen=True)
class ExistsCheck(BaseSpecification[Record]):
    """Field is present and non-empty (``present=True``) or absent/empty."""

    path: str
    present: bool = True

    def is_satisfied_by(self, candidate: Record) -> bool:
        item_value = resolve(candidate, self.path)
        has_value = item_value is not None and item_value != ""
        return has_value == self.present


@dataclasses.dataclass(frozen=True)
class SentinelNull(BaseSpecification[Record]):
    """Field is ``None`` or unreachable."""

    path: str

    def is_satisfied_by(self, candidate: Record) -> bool:
        return resolve(candidate, self.path) is None


@dataclasses.dataclass(frozen=True)
class PassThrough(BaseSpecification[Record]):
    """Always matches; the caller applies this filter before building the engine."""

    key: str

    def is_satisfied_by(self, candidate: Record) -> bool:  # noqa: ARG002
        return True


FilterValue = Union[Scalar, Membership, Range, ExistsCheck, SentinelNull, PassThrough]
FILTER_TYPES: tuple[type, ...] = (Scalar, Membership, Range, ExistsCheck, SentinelNull, PassThrough)


def is_inactive(raw: Any) -> bool:
    """An empty string or ``None`` switches a filter off."""
    return raw is None or (isinstance(raw, str) and raw == "")


# ---------------------------------------------------------------------------
# Named keys
# ---------------------------------------------------------------------------


def _owner_id(raw: Any) -> FilterValue | None:
    if raw == SENTINEL_NULL:
        return SentinelNull("owner_id")
    return _generic("owner_id", raw)


def _year_bound(bound: str) -> Callable[[Any], FilterValue | None]:
    def classify(raw: Any) -> FilterValue | None:
        if isinstance(raw, bool) or as_number(raw) is None:
            return None
        return Range("year", **{bound: raw})

    return classify


def _contact(raw: Any) -> FilterValue | None:
    if raw == "has_contact":
        return ExistsCheck("contact", present=True)
    if raw == "no_contact":
        return ExistsCheck("contact", present=False)
    return None


def _paid_at(raw: Any) -> FilterValue | None:
    if isinstance(raw, str):
        raw = {"true": True, "false": False}.get(raw.strip().lower())
    if not isinstance(raw, bool):
        return None
    return ExistsCheck("paid_at", present=raw)


CUSTOM_FILTERS: dict[str, Callable[[Any], FilterValue | None]] = {
    "owner_id": _owner_id,
    "yearFrom": _year_bound("min"),
    "yearTo": _year_bound("max"),
    "contact_filter": _contact,
    "paid_at_exists": _paid_at,
    "vehicle_count_filter": lambda raw: PassThrough("vehicle_count_filter"),
}


def _generic(key: str, raw: Any) -> FilterValue | None:
    if isinstance(raw, (list, tuple, set, frozenset)):
        return Membership(key, tuple(raw))
    if isinstance(raw, Mapping):
        if "min" in raw and "max" in raw:
            return Range(key, min=raw["min"], max=raw["max"])
        return None
    return Scalar(key, raw)


def coerce_filter(key: str, raw: Any) -> FilterValue | None:
    """Classify a caller-supplied filter value; ``None`` means inactive.

    Tagged values pass through untouched. Values that are empty, or whose
    shape does not fit the named key they were set under, are inactive.
    """
    if isinstance(raw, FILTER_TYPES):
        return raw
    if is_inactive(raw):
        return None
    classify = CUSTOM_FILTERS.get(key)
    if classify is not None:
        return classify(raw)
    return _generic(key, raw)


__all__ = [
    "CUSTOM_FILTERS",
    "FILTER_TYPES",
    "SENTINEL_NULL",
    "ExistsCheck",
    "FilterValue",
    "Membership",
    "PassThrough",
    "Range",
    "Scalar",
    "SentinelNull",
    "coerce_filter",
    "is_inactive",
]
