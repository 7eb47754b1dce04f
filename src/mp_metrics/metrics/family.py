"""Metrics – Family: one named metric and all of its labelled instances."""
from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from mp_metrics.config import MetricsSettings
from mp_metrics.kernel.errors import DuplicateLabelNameError, LabelCardinalityError, MetricsError
from mp_metrics.kernel.labels import (
    Label,
    LabelSetKey,
    LabelsInput,
    to_labels,
    validate_label_name,
    validate_metric_name,
)
from mp_metrics.metrics.ports import CollectedMetric, FamilySnapshot, Metric, MetricType
from mp_metrics.metrics.store import MetricStore
from mp_metrics.observability.logging import get_logger

M = TypeVar("M", bound=Metric)

_logger = get_logger(__name__)


def _validate_declaration(
    name: str,
    constant_labels: LabelsInput,
    variable_labels: Iterable[str],
) -> tuple[tuple[Label, ...], tuple[str, ...]]:
    validate_metric_name(name)
    constant = to_labels(constant_labels)
    for label in constant:
        validate_label_name(label.name)
    variable = tuple(variable_labels)
    seen = {label.name for label in constant}
    for label_name in variable:
        validate_label_name(label_name)
        if label_name in seen:
            raise DuplicateLabelNameError(label_name)
        seen.add(label_name)
    return constant, variable


class Family(Generic[M]):
    """A named collection of metrics of one type, keyed by label set.

    *factory* builds a new metric; it is usually the metric class itself and
    receives whatever extra arguments are passed to :meth:`add` or
    :meth:`with_label_values`.

    Example::

        requests = Family(Counter, "http_requests_total", "Total HTTP requests",
                          {"service": "orders"}, variable_labels=["status"])
        requests.with_label_values(["200"]).increment()
        requests.add({"status": "500"}).increment()

        latency = Family(Histogram, "request_seconds", "Request latency")
        latency.add({"route": "/orders"}, [0.1, 0.5, 1.0]).observe(0.42)

    Args:
        factory: Callable returning a new metric instance.
        name: Metric name, ``[a-zA-Z_:][a-zA-Z0-9_:]*``.
        help: Human-readable description.
        constant_labels: Labels attached to every instance, in export order.
        variable_labels: Label names whose values are given positionally to
            :meth:`with_label_values`.
        metric_type: Overrides ``factory.metric_type`` when the factory is not
            a metric class.
        settings: Runtime settings; defaults to :class:`MetricsSettings`.

    Raises:
        InvalidNameError: *name* is empty or malformed.
        InvalidLabelNameError: a constant or variable label name is malformed
            or reserved.
        DuplicateLabelNameError: a label name is declared twice.
    """

    def __init__(
        self,
        factory: Callable[..., M],
        name: str,
        help: str,
        constant_labels: LabelsInput = None,
        *,
        variable_labels: Iterable[str] = (),
        metric_type: MetricType | None = None,
        settings: MetricsSettings | None = None,
    ) -> None:
        try:
            constant, variable = _validate_declaration(name, constant_labels, variable_labels)
        except MetricsError as exc:
            exc.for_family(name)
            raise

        resolved_type = metric_type or getattr(factory, "metric_type", None)
        if resolved_type is None:
            raise TypeError(f"Cannot determine metric type of factory {factory!r}")

        self._factory = factory
        self._name = name
        self._help = help
        self._type = MetricType(resolved_type)
        self._constant_labels = constant
        self._variable_labels = variable
        self._settings = settings or MetricsSettings()
        self._store: MetricStore[M] = MetricStore()
        self._cardinality_lock = threading.Lock()
        self._cardinality_warned = False

    # ------------------------------------------------------------------
    # Static description
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def help(self) -> str:
        return self._help

    @property
    def type(self) -> MetricType:
        return self._type

    @property
    def constant_labels(self) -> tuple[Label, ...]:
        return self._constant_labels

    @property
    def variable_labels(self) -> tuple[str, ...]:
        return self._variable_labels

    @property
    def settings(self) -> MetricsSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def add(self, labels: LabelsInput = None, *args: Any, **kwargs: Any) -> M:
        """Return the metric for *labels*, creating it on first use.

        Extra positional and keyword arguments are forwarded to the factory
        when a new metric is built (e.g. histogram bucket boundaries).  They
        are ignored when the metric already exists.

        Raises:
            InvalidLabelNameError: a dynamic label name is malformed or reserved.
            DuplicateLabelNameError: a dynamic label repeats a name or collides
                with a constant label.
        """
        try:
            dynamic = to_labels(labels)
            for label in dynamic:
                validate_label_name(label.name)
            key, ordered = LabelSetKey.merge(self._constant_labels, dynamic)
            metric, created = self._store.get_or_create(
                key, ordered, lambda: self._factory(*args, **kwargs)
            )
        except MetricsError as exc:
            exc.for_family(self._name)
            raise
        if created:
            _logger.debug("metric_created", family=self._name, labels=key.as_dict())
            self._check_cardinality()
        return metric

    def with_label_values(self, values: Sequence[str], *args: Any, **kwargs: Any) -> M:
        """Like :meth:`add`, with values given in declared variable label order.

        Raises:
            LabelCardinalityError: ``len(values)`` differs from the number of
                declared variable labels.
        """
        values = list(values)
        if len(values) != len(self._variable_labels):
            raise LabelCardinalityError(len(self._variable_labels), len(values)).for_family(
                self._name
            )
        return self.add(list(zip(self._variable_labels, values)), *args, **kwargs)

    def remove(self, metric: M | LabelSetKey | None) -> None:
        """Detach *metric* from the family.  Unknown metrics and ``None`` are ignored."""
        entry = self._store.remove(metric)
        if entry is None:
            return
        _logger.debug(
            "metric_removed",
            family=self._name,
            labels=dict(label.as_tuple() for label in entry.labels),
        )
        threshold = self._settings.cardinality_warning_threshold
        if threshold:
            with self._cardinality_lock:
                if len(self._store) <= threshold:
                    self._cardinality_warned = False

    def has(self, labels: LabelsInput = None) -> bool:
        """Whether an instance exists for *labels*; never creates one.

        Label sets that could never be registered (a repeated name, or a
        name colliding with a constant label) are reported as absent.
        """
        try:
            key, _ = LabelSetKey.merge(self._constant_labels, labels)
        except DuplicateLabelNameError:
            return False
        return key in self._store

    def clear(self) -> None:
        """Detach every instance."""
        self._store.clear()
        with self._cardinality_lock:
            self._cardinality_warned = False

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def collect(self) -> list[CollectedMetric]:
        """Snapshot every registered instance.

        The instance list is copied under the store lock; each value is then
        read under that instance's own lock.
        """
        return [
            CollectedMetric(labels=entry.labels, value=entry.metric.snapshot())
            for entry in self._store.snapshot()
        ]

    def collect_family(self) -> FamilySnapshot:
        return FamilySnapshot(
            name=self._name,
            help=self._help,
            type=self._type,
            metrics=tuple(self.collect()),
        )

    def _check_cardinality(self) -> None:
        threshold = self._settings.cardinality_warning_threshold
        if not threshold:
            return
        with self._cardinality_lock:
            if self._cardinality_warned:
                return
            size = len(self._store)
            if size <= threshold:
                return
            self._cardinality_warned = True
        _logger.warning(
            "cardinality_threshold_exceeded",
            family=self._name,
            size=size,
            threshold=threshold,
        )

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Family(name={self._name!r}, type={self._type.value!r}, size={len(self)})"


__all__ = ["Family"]
