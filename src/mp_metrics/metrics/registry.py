"""Metrics – Registry: an injectable collection of families.

There is deliberately no module-level default registry; applications create
one and pass it to whatever needs to register or export metrics.
"""
from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any

from mp_metrics.config import MetricsSettings
from mp_metrics.kernel.errors import FamilyConflictError
from mp_metrics.kernel.labels import LabelsInput, to_labels
from mp_metrics.metrics.counter import Counter
from mp_metrics.metrics.family import Family
from mp_metrics.metrics.gauge import Gauge
from mp_metrics.metrics.histogram import Histogram
from mp_metrics.metrics.ports import FamilySnapshot
from mp_metrics.observability.logging import get_logger

_logger = get_logger(__name__)


class Registry:
    """Holds families by name and collects them for an exporter.

    Usage::

        registry = Registry()
        requests = registry.counter("http_requests_total", "Total HTTP requests",
                                    variable_labels=["method", "status"])
        requests.with_label_values(["GET", "200"]).increment()
        for family in registry.collect():
            exporter.write(family)
    """

    def __init__(self, settings: MetricsSettings | None = None) -> None:
        self._settings = settings or MetricsSettings()
        self._families: dict[str, Family[Any]] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> MetricsSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Family builders
    # ------------------------------------------------------------------

    def counter(
        self,
        name: str,
        help: str,
        constant_labels: LabelsInput = None,
        *,
        variable_labels: Iterable[str] = (),
    ) -> Family[Counter]:
        return self._build(Counter, name, help, constant_labels, variable_labels)

    def gauge(
        self,
        name: str,
        help: str,
        constant_labels: LabelsInput = None,
        *,
        variable_labels: Iterable[str] = (),
    ) -> Family[Gauge]:
        return self._build(Gauge, name, help, constant_labels, variable_labels)

    def histogram(
        self,
        name: str,
        help: str,
        constant_labels: LabelsInput = None,
        *,
        variable_labels: Iterable[str] = (),
    ) -> Family[Histogram]:
        return self._build(Histogram, name, help, constant_labels, variable_labels)

    def _build(
        self,
        factory: Callable[..., Any],
        name: str,
        help: str,
        constant_labels: LabelsInput,
        variable_labels: Iterable[str],
    ) -> Family[Any]:
        family: Family[Any] = Family(
            factory,
            name,
            help,
            to_labels(constant_labels),
            variable_labels=variable_labels,
            settings=self._settings,
        )
        return self.register(family)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, family: Family[Any]) -> Family[Any]:
        """Register *family*, or return the equivalent family already registered.

        Raises:
            FamilyConflictError: a family with the same name but a different
                type, help text or label declaration exists.
        """
        with self._lock:
            existing = self._families.get(family.name)
            if existing is None:
                self._families[family.name] = family
                _logger.debug("family_registered", family=family.name, type=family.type.value)
                return family
            if existing is family:
                return existing
            reason = _conflict(existing, family)
            if reason is not None:
                raise FamilyConflictError(family.name, reason)
            return existing

    def unregister(self, family: Family[Any] | str) -> bool:
        name = family if isinstance(family, str) else family.name
        with self._lock:
            existing = self._families.get(name)
            if existing is None:
                return False
            if not isinstance(family, str) and existing is not family:
                return False
            del self._families[name]
        _logger.debug("family_unregistered", family=name)
        return True

    def get(self, name: str) -> Family[Any] | None:
        with self._lock:
            return self._families.get(name)

    def families(self) -> list[Family[Any]]:
        with self._lock:
            return list(self._families.values())

    def collect(self) -> list[FamilySnapshot]:
        """Snapshot every family that currently holds at least one metric."""
        snapshots = []
        for family in self.families():
            snapshot = family.collect_family()
            if snapshot.metrics:
                snapshots.append(snapshot)
        return snapshots

    def __len__(self) -> int:
        with self._lock:
            return len(self._families)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._families


def _conflict(existing: Family[Any], candidate: Family[Any]) -> str | None:
    if existing.type is not candidate.type:
        return f"type {existing.type.value!r}"
    if existing.help != candidate.help:
        return f"help {existing.help!r}"
    if existing.constant_labels != candidate.constant_labels:
        return "different constant labels"
    if existing.variable_labels != candidate.variable_labels:
        return f"variable labels {list(existing.variable_labels)!r}"
    return None


__all__ = ["Registry"]
