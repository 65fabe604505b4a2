"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class QueryContextProcessor:
    """structlog processor that stamps a fixed list-page context on every event.

    Usage::

        JsonLoggerFactory.configure(
            extra_processors=[QueryContextProcessor(list_page="vehicles")],
        )
    """

    def __init__(self, **context: Any) -> None:
        self._context = context

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in self._context.items():
            event_dict.setdefault(key, value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["QueryContextProcessor", "get_logger"]
