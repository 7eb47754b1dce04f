"""Testing support – Hypothesis strategies for property-based tests."""

from mp_metrics.testing.strategies import (
    bucket_boundaries_strategy,
    label_name_strategy,
    label_set_strategy,
    metric_name_strategy,
)

__all__ = [
    "bucket_boundaries_strategy",
    "label_name_strategy",
    "label_set_strategy",
    "metric_name_strategy",
]
