"""Metrics – counters, gauges, histograms and the families that own them."""
from mp_metrics.metrics.counter import Counter
from mp_metrics.metrics.family import Family
from mp_metrics.metrics.gauge import Gauge
from mp_metrics.metrics.histogram import Histogram
from mp_metrics.metrics.ports import (
    BucketCount,
    CollectedMetric,
    CounterSnapshot,
    FamilySnapshot,
    GaugeSnapshot,
    HistogramSnapshot,
    Metric,
    MetricSnapshot,
    MetricType,
)
from mp_metrics.metrics.registry import Registry
from mp_metrics.metrics.store import MetricStore, StoreEntry

__all__ = [
    "BucketCount",
    "CollectedMetric",
    "Counter",
    "CounterSnapshot",
    "Family",
    "FamilySnapshot",
    "Gauge",
    "GaugeSnapshot",
    "Histogram",
    "HistogramSnapshot",
    "Metric",
    "MetricSnapshot",
    "MetricStore",
    "MetricType",
    "Registry",
    "StoreEntry",
]
