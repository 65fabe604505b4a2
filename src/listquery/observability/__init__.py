"""Observability – structured logging for the list query engine."""
from listquery.observability.logging import JsonLoggerFactory, QueryContextProcessor, get_logger

__all__ = ["JsonLoggerFactory", "QueryContextProcessor", "get_logger"]
