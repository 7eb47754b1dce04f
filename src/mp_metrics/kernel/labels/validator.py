"""Kernel labels – metric and label name validation."""
from __future__ import annotations

import re

from mp_metrics.kernel.errors import InvalidLabelNameError, InvalidNameError

_METRIC_NAME_RE = re.compile(r"[a-zA-Z_:][a-zA-Z0-9_:]*")
_LABEL_NAME_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
_RESERVED_PREFIX = "__"


def is_valid_metric_name(name: str) -> bool:
    return bool(name) and _METRIC_NAME_RE.fullmatch(name) is not None


def is_valid_label_name(name: str) -> bool:
    if name.startswith(_RESERVED_PREFIX):
        return False
    return _LABEL_NAME_RE.fullmatch(name) is not None


def validate_metric_name(name: str) -> None:
    """Raise :class:`InvalidNameError` unless *name* is a usable metric name."""
    if not name:
        raise InvalidNameError(name, "Metric name must not be empty")
    if _METRIC_NAME_RE.fullmatch(name) is None:
        raise InvalidNameError(name)


def validate_label_name(name: str) -> None:
    """Raise :class:`InvalidLabelNameError` for malformed or reserved label names."""
    if _LABEL_NAME_RE.fullmatch(name) is None:
        raise InvalidLabelNameError(name)
    if name.startswith(_RESERVED_PREFIX):
        raise InvalidLabelNameError(name, reserved=True)


__all__ = [
    "is_valid_label_name",
    "is_valid_metric_name",
    "validate_label_name",
    "validate_metric_name",
]
