"""Metrics – Histogram with cumulative buckets."""
from __future__ import annotations

import bisect
import math
import threading
import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import ClassVar

from mp_metrics.kernel.errors import InvalidBucketsError
from mp_metrics.metrics.ports import BucketCount, HistogramSnapshot, MetricType


def _validate_boundaries(boundaries: tuple[float, ...]) -> None:
    for bound in boundaries:
        if math.isnan(bound):
            raise InvalidBucketsError(boundaries, "NaN is not a valid boundary")
        if math.isinf(bound):
            raise InvalidBucketsError(boundaries, "boundaries must be finite, +Inf is implicit")
    for lower, upper in zip(boundaries, boundaries[1:]):
        if not lower < upper:
            raise InvalidBucketsError(boundaries, f"{upper!r} does not follow {lower!r}")


class Histogram:
    """Distribution of observed values over fixed buckets.

    Bucket ``i`` counts every observation ``<= boundaries[i]``; an implicit
    ``+Inf`` bucket counts all of them.  Counts are kept per bucket and made
    cumulative when a snapshot is taken, so :meth:`observe` touches a single
    slot.

    Example::

        latency = family.add({"route": "/orders"}, [0.05, 0.1, 0.5, 1.0])
        latency.observe(0.42)
        with latency.time():
            handle_request()
    """

    metric_type: ClassVar[MetricType] = MetricType.HISTOGRAM

    def __init__(self, boundaries: Iterable[float] = ()) -> None:
        bounds = tuple(float(b) for b in boundaries)
        _validate_boundaries(bounds)
        self._boundaries = bounds
        self._lock = threading.Lock()
        # Last slot is the +Inf bucket.
        self._counts = [0] * (len(bounds) + 1)
        self._sum = 0.0
        self._count = 0

    @property
    def boundaries(self) -> tuple[float, ...]:
        return self._boundaries

    def observe(self, value: float) -> None:
        """Record one observation."""
        if math.isnan(value):
            index = len(self._boundaries)
        else:
            index = bisect.bisect_left(self._boundaries, value)
        with self._lock:
            self._counts[index] += 1
            self._sum += value
            self._count += 1

    @contextmanager
    def time(self) -> Iterator[None]:
        """Observe the wall-clock duration of the block, in seconds."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start)

    def snapshot(self) -> HistogramSnapshot:
        with self._lock:
            counts = list(self._counts)
            total = self._sum
            count = self._count
        buckets: list[BucketCount] = []
        running = 0
        for bound, bucket_count in zip((*self._boundaries, math.inf), counts):
            running += bucket_count
            buckets.append(BucketCount(upper_bound=bound, cumulative_count=running))
        return HistogramSnapshot(buckets=tuple(buckets), sum=total, count=count)

    def __repr__(self) -> str:
        return f"Histogram(boundaries={list(self._boundaries)!r})"


__all__ = ["Histogram"]
