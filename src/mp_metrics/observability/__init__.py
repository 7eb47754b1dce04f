"""Observability – structured logging for the metrics library itself."""

from mp_metrics.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
