"""Metrics – Counter."""
from __future__ import annotations

import threading
from typing import ClassVar

from mp_metrics.kernel.errors import NegativeAmountError
from mp_metrics.metrics.ports import CounterSnapshot, MetricType


class Counter:
    """Monotonically increasing value.

    Use for: request counts, errors, completed tasks.

    Example::

        requests = family.add({"status": "200"})
        requests.increment()
        requests.increment(5)
    """

    metric_type: ClassVar[MetricType] = MetricType.COUNTER

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0.0

    def increment(self, amount: float = 1.0) -> None:
        """Add *amount* (must be ``>= 0``) to the counter."""
        # NaN fails the comparison as well
        if not amount >= 0:
            raise NegativeAmountError(amount)
        with self._lock:
            self._value += amount

    def value(self) -> float:
        with self._lock:
            return self._value

    def snapshot(self) -> CounterSnapshot:
        return CounterSnapshot(value=self.value())

    def __repr__(self) -> str:
        return f"Counter(value={self.value()!r})"


__all__ = ["Counter"]
