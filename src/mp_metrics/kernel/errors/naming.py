"""Naming errors – metric and label names that break the naming rules."""

from __future__ import annotations

from typing import Any

from mp_metrics.kernel.errors.base import MetricsError


class NamingError(MetricsError, ValueError):
    """A metric or label name was rejected."""

    default_code = "naming_error"


class InvalidNameError(NamingError):
    """Metric name is empty or does not match ``[a-zA-Z_:][a-zA-Z0-9_:]*``."""

    default_code = "invalid_metric_name"

    def __init__(self, name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Invalid metric name {name!r}",
            detail={"name": name},
            **kwargs,
        )
        self.name = name


class InvalidLabelNameError(NamingError):
    """Label name does not match ``[a-zA-Z_][a-zA-Z0-9_]*`` or is reserved."""

    default_code = "invalid_label_name"

    def __init__(
        self,
        label_name: str,
        message: str | None = None,
        *,
        reserved: bool = False,
        **kwargs: Any,
    ) -> None:
        if message is None:
            reason = "reserved prefix '__'" if reserved else "does not match naming rules"
            message = f"Invalid label name {label_name!r}: {reason}"
        super().__init__(message, detail={"label_name": label_name, "reserved": reserved}, **kwargs)
        self.label_name = label_name
        self.reserved = reserved


class DuplicateLabelNameError(NamingError):
    """The same label name appears twice in one label set.

    Also raised when a dynamic label collides with a constant label.
    """

    default_code = "duplicate_label_name"

    def __init__(self, label_name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Label name {label_name!r} appears more than once",
            detail={"label_name": label_name},
            **kwargs,
        )
        self.label_name = label_name


__all__ = [
    "DuplicateLabelNameError",
    "InvalidLabelNameError",
    "InvalidNameError",
    "NamingError",
]
