"""Observability – structured logging helpers."""
from mp_metrics.observability.logging.factory import JsonLoggerFactory
from mp_metrics.observability.logging.logger import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
