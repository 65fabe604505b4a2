"""Observability – structured logging helpers."""
from listquery.observability.logging.factory import JsonLoggerFactory
from listquery.observability.logging.processors import QueryContextProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "QueryContextProcessor",
    "get_logger",
]
