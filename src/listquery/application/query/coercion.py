"""Application query – value coercion shared by search, filters and sort.

Filter values frequently arrive as strings from HTML form controls while the
records carry numbers; these helpers decide when such pairs are equal or
ordered.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any

_NUMBER_TYPES = (int, float, Decimal)


def is_number(value: Any) -> bool:
    """``True`` for ints, floats and decimals, never for booleans."""
    return isinstance(value, _NUMBER_TYPES) and not isinstance(value, bool)


def as_number(value: Any) -> int | float | Decimal | None:
    """Return *value* as a number, parsing numeric strings; ``None`` otherwise."""
    if is_number(value):
        return value
    if isinstance(value, str) and value.strip():
        try:
            number = float(value)
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


def to_text(value: Any) -> str:
    """Render *value* the way a list page displays it.

    Booleans become ``"true"``/``"false"`` and integral floats lose their
    trailing ``.0`` so ``2010.0`` matches a search for ``"2010"``. Lists and
    tuples are joined with commas, ``None`` members rendering empty.
    """
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that never conflates booleans with numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def loose_equals(item_value: Any, filter_value: Any) -> bool:
    """Strict equality, plus a numeric field matching its string form."""
    if strict_equals(item_value, filter_value):
        return True
    return isinstance(filter_value, str) and is_number(item_value) and to_text(item_value) == filter_value


def relate(left: Any, right: Any) -> int | None:
    """Three-way comparison; ``None`` when the pair has no natural ordering.

    Numbers compare numerically, including against numeric strings. Any
    other pair uses its native ordering when the types support one.
    """
    if is_number(left) or is_number(right):
        a, b = as_number(left), as_number(right)
        if a is None or b is None:
            return None
        return (a > b) - (a < b)
    try:
        return (left > right) - (left < right)
    except TypeError:
        return None


__all__ = ["as_number", "is_number", "loose_equals", "relate", "strict_equals", "to_text"]
