"""Kernel – errors and label primitives shared by every metric type."""

from mp_metrics.kernel.errors import (
    DuplicateLabelNameError,
    FamilyConflictError,
    InvalidBucketsError,
    InvalidLabelNameError,
    InvalidNameError,
    LabelCardinalityError,
    MetricsError,
    NamingError,
    NegativeAmountError,
    UsageError,
)
from mp_metrics.kernel.labels import Label, LabelSetKey

__all__ = [
    "DuplicateLabelNameError",
    "FamilyConflictError",
    "InvalidBucketsError",
    "InvalidLabelNameError",
    "InvalidNameError",
    "Label",
    "LabelCardinalityError",
    "LabelSetKey",
    "MetricsError",
    "NamingError",
    "NegativeAmountError",
    "UsageError",
]
