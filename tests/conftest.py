"""Shared fixtures for the listquery test-suite."""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Undo any structlog / root-logger configuration a test installs."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def vehicles() -> list[dict[str, Any]]:
    """The three-vehicle dataset used throughout the engine tests."""
    return [
        {"id": 1, "plate": "ABC1", "year": 2010, "owner_id": 5},
        {"id": 2, "plate": "XYZ2", "year": 2020, "owner_id": None},
        {"id": 3, "plate": "ABC9", "year": 2015, "owner_id": 7},
    ]


@pytest.fixture()
def numbered() -> list[dict[str, Any]]:
    """25 records, enough for three pages of ten."""
    return [{"id": i, "year": 2000 + (i % 7), "owner_id": i % 4 or None} for i in range(1, 26)]
