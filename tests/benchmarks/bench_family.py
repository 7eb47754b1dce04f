"""Benchmark: family hot path and collection.

Measures ``Counter.increment`` and ``Histogram.observe`` on an already
registered instance, the get-or-create lookup of an existing label set, and
``Family.collect`` over a populated family.
"""

from __future__ import annotations

from mp_metrics.metrics import Counter, Family, Histogram

_BOUNDARIES = [0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]


def _counter_family(size: int = 0) -> Family[Counter]:
    family = Family(Counter, "bench_requests_total", "Benchmark requests", {"service": "bench"})
    for i in range(size):
        family.add({"route": f"/r{i}"}).increment()
    return family


def test_counter_increment(benchmark) -> None:
    counter = _counter_family().add({"route": "/"})
    benchmark(counter.increment)
    assert counter.value() > 0


def test_histogram_observe(benchmark) -> None:
    family = Family(Histogram, "bench_latency_seconds", "Benchmark latency")
    histogram = family.add({"route": "/"}, _BOUNDARIES)
    benchmark(histogram.observe, 0.3)
    assert histogram.snapshot().count > 0


def test_add_existing_label_set(benchmark) -> None:
    family = _counter_family(100)
    result = benchmark(family.add, {"route": "/r50"})
    assert result is family.add({"route": "/r50"})


def test_with_label_values_existing(benchmark) -> None:
    family = Family(Counter, "bench_total", "Benchmark", variable_labels=["method", "status"])
    family.with_label_values(["GET", "200"])
    benchmark(family.with_label_values, ["GET", "200"])
    assert len(family) == 1


def test_collect_1000_instances(benchmark) -> None:
    family = _counter_family(1000)
    collected = benchmark(family.collect)
    assert len(collected) == 1000
