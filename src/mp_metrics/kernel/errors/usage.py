"""Usage errors – invalid arguments to family and metric operations."""

from __future__ import annotations

from typing import Any

from mp_metrics.kernel.errors.base import MetricsError


class UsageError(MetricsError, ValueError):
    """A family or metric operation was called with invalid arguments."""

    default_code = "usage_error"


class LabelCardinalityError(UsageError):
    """Number of label values differs from the declared variable labels."""

    default_code = "label_cardinality"

    def __init__(self, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            f"Expected {expected} label value(s), got {actual}",
            detail={"expected": expected, "actual": actual},
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class NegativeAmountError(UsageError):
    """A counter was asked to move backwards."""

    default_code = "negative_amount"

    def __init__(self, amount: float, **kwargs: Any) -> None:
        super().__init__(
            f"Counter increment must be non-negative, got {amount!r}",
            detail={"amount": amount},
            **kwargs,
        )
        self.amount = amount


class InvalidBucketsError(UsageError):
    """Histogram bucket boundaries are not strictly ascending finite numbers."""

    default_code = "invalid_buckets"

    def __init__(self, boundaries: tuple[float, ...], reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid bucket boundaries {list(boundaries)!r}: {reason}",
            detail={"boundaries": list(boundaries), "reason": reason},
            **kwargs,
        )
        self.boundaries = boundaries
        self.reason = reason


class FamilyConflictError(UsageError):
    """A family with the same name but a different shape is already registered."""

    default_code = "family_conflict"

    def __init__(self, name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Family {name!r} is already registered with {reason}",
            detail={"name": name, "reason": reason},
            **kwargs,
        )
        self.name = name
        self.reason = reason


__all__ = [
    "FamilyConflictError",
    "InvalidBucketsError",
    "LabelCardinalityError",
    "NegativeAmountError",
    "UsageError",
]
