"""Root error class for the mp-metrics error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class MetricsError(Exception):
    """Root of the error hierarchy.

    Errors raised while a :class:`~mp_metrics.metrics.Family` is built or
    used carry the family name in ``detail["family"]``, so a log line says
    which metric rejected the input.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context (names, values, counts) as a plain dict.
        cause: Original exception that triggered this error.
    """

    default_code: str = "metrics_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def family(self) -> str | None:
        """Name of the family the error was raised for, if known."""
        return self.detail.get("family")

    def for_family(self, name: str) -> "MetricsError":
        """Attach the family *name* (first one wins) and return ``self``."""
        self.detail.setdefault("family", name)
        return self

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        family = f", family={self.family!r}" if self.family is not None else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{family})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict, suitable as structlog event fields."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["MetricsError"]
