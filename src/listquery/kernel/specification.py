"""Specification pattern – composable boolean record rules."""

from __future__ import annotations

import abc
import functools
import operator
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """A yes/no rule over one record.

    Subclasses implement ``is_satisfied_by``; ``&`` builds a conjunction.

    Example::

        class HasPlate(BaseSpecification[dict]):
            def is_satisfied_by(self, candidate: dict) -> bool:
                return bool(candidate.get("plate_no"))

        spec = HasPlate() & SentinelNull("owner_id")
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __and__(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class AlwaysSatisfied(BaseSpecification[T]):
    """Identity element for ``&``."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True


def all_of(specs: Iterable[BaseSpecification[T]]) -> BaseSpecification[T]:
    """Fold *specs* into a single conjunction; an empty iterable matches everything."""
    return functools.reduce(operator.and_, specs, AlwaysSatisfied())


__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "BaseSpecification",
    "all_of",
]
