"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    MetricsError
    ├── NamingError              (naming.py)
    │   ├── InvalidNameError
    │   ├── InvalidLabelNameError
    │   └── DuplicateLabelNameError
    └── UsageError               (usage.py)
        ├── LabelCardinalityError
        ├── NegativeAmountError
        ├── InvalidBucketsError
        └── FamilyConflictError

Configuration errors live in :mod:`mp_metrics.config.validation`.
"""

from mp_metrics.kernel.errors.base import MetricsError
from mp_metrics.kernel.errors.naming import (
    DuplicateLabelNameError,
    InvalidLabelNameError,
    InvalidNameError,
    NamingError,
)
from mp_metrics.kernel.errors.usage import (
    FamilyConflictError,
    InvalidBucketsError,
    LabelCardinalityError,
    NegativeAmountError,
    UsageError,
)

__all__ = [
    "DuplicateLabelNameError",
    "FamilyConflictError",
    "InvalidBucketsError",
    "InvalidLabelNameError",
    "InvalidNameError",
    "LabelCardinalityError",
    "MetricsError",
    "NamingError",
    "NegativeAmountError",
    "UsageError",
]
