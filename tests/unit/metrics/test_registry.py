"""Unit tests for Registry."""

from __future__ import annotations

import pytest

from mp_metrics.config import MetricsSettings
from mp_metrics.kernel.errors import FamilyConflictError, InvalidNameError
from mp_metrics.metrics import Counter, Family, MetricType, Registry


@pytest.fixture()
def registry() -> Registry:
    return Registry()


class TestBuilders:
    def test_counter(self, registry: Registry) -> None:
        family = registry.counter("requests_total", "Requests", {"service": "orders"})
        assert family.type is MetricType.COUNTER
        assert registry.get("requests_total") is family
        assert "requests_total" in registry

    def test_gauge_and_histogram(self, registry: Registry) -> None:
        gauge = registry.gauge("in_flight", "In flight")
        histogram = registry.histogram("latency_seconds", "Latency", variable_labels=["route"])
        assert gauge.type is MetricType.GAUGE
        assert histogram.type is MetricType.HISTOGRAM
        assert histogram.variable_labels == ("route",)
        assert len(registry) == 2

    def test_invalid_name_not_registered(self, registry: Registry) -> None:
        with pytest.raises(InvalidNameError):
            registry.counter("", "empty")
        assert len(registry) == 0

    def test_settings_propagate_to_families(self) -> None:
        settings = MetricsSettings(cardinality_warning_threshold=7)
        registry = Registry(settings)
        assert registry.settings is settings
        family = registry.counter("requests_total", "Requests")
        assert family.settings is settings


class TestRegistration:
    def test_same_shape_returns_existing(self, registry: Registry) -> None:
        first = registry.counter("requests_total", "Requests", variable_labels=["status"])
        second = registry.counter("requests_total", "Requests", variable_labels=["status"])
        assert first is second

    def test_type_conflict(self, registry: Registry) -> None:
        registry.counter("requests_total", "Requests")
        with pytest.raises(FamilyConflictError):
            registry.gauge("requests_total", "Requests")

    def test_help_conflict(self, registry: Registry) -> None:
        registry.counter("requests_total", "Requests")
        with pytest.raises(FamilyConflictError):
            registry.counter("requests_total", "Something else")

    def test_label_conflict(self, registry: Registry) -> None:
        registry.counter("requests_total", "Requests", {"a": "1"})
        with pytest.raises(FamilyConflictError):
            registry.counter("requests_total", "Requests", {"a": "2"})
        with pytest.raises(FamilyConflictError):
            registry.counter("requests_total", "Requests", {"a": "1"}, variable_labels=["b"])

    def test_register_external_family(self, registry: Registry) -> None:
        family = Family(Counter, "external_total", "External")
        assert registry.register(family) is family
        assert registry.register(family) is family

    def test_unregister(self, registry: Registry) -> None:
        family = registry.counter("requests_total", "Requests")
        assert registry.unregister(family) is True
        assert registry.unregister(family) is False
        assert registry.get("requests_total") is None

    def test_unregister_by_name(self, registry: Registry) -> None:
        registry.counter("requests_total", "Requests")
        assert registry.unregister("requests_total") is True
        assert registry.unregister("missing") is False

    def test_unregister_other_family_with_same_name_is_noop(self, registry: Registry) -> None:
        registry.counter("requests_total", "Requests")
        impostor = Family(Counter, "requests_total", "Requests")
        assert registry.unregister(impostor) is False
        assert "requests_total" in registry


class TestCollect:
    def test_skips_empty_families(self, registry: Registry) -> None:
        registry.counter("empty_total", "Nothing here")
        busy = registry.counter("busy_total", "Busy")
        busy.add({"route": "/"}).increment(2)
        snapshots = registry.collect()
        assert [s.name for s in snapshots] == ["busy_total"]
        assert snapshots[0].metrics[0].value.value == 2

    def test_registration_order(self, registry: Registry) -> None:
        for name in ("c_total", "a_total", "b_total"):
            registry.counter(name, "help").add({}).increment()
        assert [s.name for s in registry.collect()] == ["c_total", "a_total", "b_total"]

    def test_empty_registry(self, registry: Registry) -> None:
        assert registry.collect() == []
