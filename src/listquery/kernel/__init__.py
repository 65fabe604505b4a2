"""Kernel – errors, field resolution and specifications shared by every layer."""

from listquery.kernel.errors import ApplicationError, BaseError, DomainError, ValidationError
from listquery.kernel.paths import resolve, split_path
from listquery.kernel.specification import (
    AlwaysSatisfied,
    AndSpecification,
    BaseSpecification,
    all_of,
)

__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "ApplicationError",
    "BaseError",
    "BaseSpecification",
    "DomainError",
    "ValidationError",
    "all_of",
    "resolve",
    "split_path",
]
