"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ConfigError      (listquery.config.validation)
"""

from listquery.kernel.errors.application import ApplicationError
from listquery.kernel.errors.base import BaseError
from listquery.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
