"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class JsonLoggerFactory:
    """One JSON object per line on stderr for every ``list_query.*`` event.

    structlog events are handed to the stdlib root logger so the level set
    here also gates the engine's debug events.
    """

    @staticmethod
    def configure(level: int = logging.INFO, *, extra_processors: list[Any] | None = None) -> None:
        chain: list[Any] = [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *(extra_processors or ()),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        structlog.configure(
            processors=chain,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler()
        handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer()))
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
