"""Kernel labels – naming rules and label set identity."""
from mp_metrics.kernel.labels.key import Label, LabelSetKey, LabelsInput, to_labels
from mp_metrics.kernel.labels.validator import (
    is_valid_label_name,
    is_valid_metric_name,
    validate_label_name,
    validate_metric_name,
)

__all__ = [
    "Label",
    "LabelSetKey",
    "LabelsInput",
    "is_valid_label_name",
    "is_valid_metric_name",
    "to_labels",
    "validate_label_name",
    "validate_metric_name",
]
