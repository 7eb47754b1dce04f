"""Metrics – Gauge."""
from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import ClassVar

from mp_metrics.metrics.ports import GaugeSnapshot, MetricType


class Gauge:
    """Point-in-time value that can go up or down.

    Use for: queue size, in-flight requests, temperatures.
    """

    metric_type: ClassVar[MetricType] = MetricType.GAUGE

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0.0

    def set(self, value: float) -> None:
        with self._lock:
            self._value = value

    def increment(self, amount: float = 1.0) -> None:
        with self._lock:
            self._value += amount

    def decrement(self, amount: float = 1.0) -> None:
        with self._lock:
            self._value -= amount

    def set_to_current_time(self) -> None:
        """Set the gauge to the current Unix timestamp."""
        self.set(time.time())

    @contextmanager
    def track_inprogress(self) -> Iterator[None]:
        """Increment on entry, decrement on exit."""
        self.increment()
        try:
            yield
        finally:
            self.decrement()

    def value(self) -> float:
        with self._lock:
            return self._value

    def snapshot(self) -> GaugeSnapshot:
        return GaugeSnapshot(value=self.value())

    def __repr__(self) -> str:
        return f"Gauge(value={self.value()!r})"


__all__ = ["Gauge"]
