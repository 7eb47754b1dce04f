"""Metrics – Metric protocol, MetricType and collected snapshot records."""
from __future__ import annotations

import dataclasses
import enum
from typing import ClassVar, Protocol, Union, runtime_checkable

from mp_metrics.kernel.labels import Label


class MetricType(str, enum.Enum):
    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"


@dataclasses.dataclass(frozen=True)
class CounterSnapshot:
    value: float


@dataclasses.dataclass(frozen=True)
class GaugeSnapshot:
    value: float


@dataclasses.dataclass(frozen=True)
class BucketCount:
    """Cumulative count of observations ``<= upper_bound``."""

    upper_bound: float
    cumulative_count: int


@dataclasses.dataclass(frozen=True)
class HistogramSnapshot:
    buckets: tuple[BucketCount, ...]
    sum: float
    count: int


MetricSnapshot = Union[CounterSnapshot, GaugeSnapshot, HistogramSnapshot]


@runtime_checkable
class Metric(Protocol):
    """Structural interface every metric held by a :class:`Family` satisfies."""

    metric_type: ClassVar[MetricType]

    def snapshot(self) -> MetricSnapshot: ...


@dataclasses.dataclass(frozen=True)
class CollectedMetric:
    """One exported time series: ordered labels plus a value snapshot."""

    labels: tuple[Label, ...]
    value: MetricSnapshot

    @property
    def label_pairs(self) -> list[tuple[str, str]]:
        return [label.as_tuple() for label in self.labels]


@dataclasses.dataclass(frozen=True)
class FamilySnapshot:
    """Everything an exporter needs to render one family."""

    name: str
    help: str
    type: MetricType
    metrics: tuple[CollectedMetric, ...]


__all__ = [
    "BucketCount",
    "CollectedMetric",
    "CounterSnapshot",
    "FamilySnapshot",
    "GaugeSnapshot",
    "HistogramSnapshot",
    "Metric",
    "MetricSnapshot",
    "MetricType",
]
