"""Metrics registry backed by prometheus_client."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from threading import RLock
from typing import Any

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    Summary,
    generate_latest,
)

from ..exceptions import MetricKindError
from .base import MetricHandle, MetricKind, MetricsRegistry

_LOGGER = logging.getLogger(__name__)

_SeriesKey = tuple[str, tuple[tuple[str, str], ...]]


def _series_key(handle: MetricHandle, labels: dict[str, str] | None) -> _SeriesKey:
    """Return a hashable key for one series."""
    return handle.name, tuple(sorted((labels or {}).items()))


class PrometheusRegistry(MetricsRegistry):
    """Thread safe registry on top of a prometheus CollectorRegistry."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the registry."""
        self._registry = registry or CollectorRegistry(auto_describe=True)
        self._lock = RLock()
        self._metrics: dict[str, Any] = {}
        self._gauge_values: dict[_SeriesKey, float] = {}

    def declare(
        self,
        name: str,
        kind: MetricKind,
        documentation: str,
        labelnames: tuple[str, ...] = (),
        buckets: Sequence[float] | None = None,
    ) -> MetricHandle:
        """Declare a metric."""
        options: dict[str, Any] = {
            "labelnames": labelnames,
            "registry": self._registry,
        }

        with self._lock:
            if kind == MetricKind.COUNTER:
                metric = Counter(name, documentation, **options)
            elif kind == MetricKind.GAUGE:
                metric = Gauge(name, documentation, **options)
            elif kind == MetricKind.HISTOGRAM:
                if buckets is not None:
                    options["buckets"] = buckets
                metric = Histogram(name, documentation, **options)
            else:
                metric = Summary(name, documentation, **options)

            self._metrics[name] = metric

        _LOGGER.debug("Declared %s metric %s", kind.value, name)
        return MetricHandle(name, kind, tuple(labelnames))

    def _series(
        self,
        handle: MetricHandle,
        labels: dict[str, str] | None,
        *kinds: MetricKind,
    ) -> Any:
        """Return the prometheus child for a label-set."""
        if handle.kind not in kinds:
            raise MetricKindError(
                f"{handle.name} is a {handle.kind.value}, "
                f"expected {'/'.join(kind.value for kind in kinds)}",
            )

        metric = self._metrics[handle.name]
        if not handle.labelnames:
            if labels:
                raise ValueError(f"{handle.name} does not take labels")
            return metric
        return metric.labels(**(labels or {}))

    def set(
        self,
        handle: MetricHandle,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge series."""
        with self._lock:
            self._series(handle, labels, MetricKind.GAUGE).set(value)
            self._gauge_values[_series_key(handle, labels)] = value

    def increment(
        self,
        handle: MetricHandle,
        value: float = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter series."""
        if value < 0:
            raise ValueError(f"Counter {handle.name} can only increase")

        with self._lock:
            self._series(handle, labels, MetricKind.COUNTER).inc(value)

    def observe(
        self,
        handle: MetricHandle,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record an observation."""
        with self._lock:
            self._series(
                handle,
                labels,
                MetricKind.HISTOGRAM,
                MetricKind.SUMMARY,
            ).observe(value)

    def adjust(
        self,
        handle: MetricHandle,
        delta: float,
        labels: dict[str, str] | None = None,
        floor: float | None = 0.0,
    ) -> float:
        """Add a delta to a gauge series, clamped at floor."""
        key = _series_key(handle, labels)

        with self._lock:
            series = self._series(handle, labels, MetricKind.GAUGE)
            value = self._gauge_values.get(key, 0.0) + delta
            if floor is not None and value < floor:
                value = floor

            series.set(value)
            self._gauge_values[key] = value

        return value

    def get(
        self,
        handle: MetricHandle,
        labels: dict[str, str] | None = None,
    ) -> float | None:
        """Return the current value of a series.

        Histograms and summaries report their observation count.
        """
        if handle.kind == MetricKind.COUNTER:
            sample = f"{handle.name.removesuffix('_total')}_total"
        elif handle.kind == MetricKind.GAUGE:
            sample = handle.name
        else:
            sample = f"{handle.name}_count"

        with self._lock:
            return self._registry.get_sample_value(sample, labels or {})

    def snapshot(self) -> bytes:
        """Return the text exposition of all series."""
        with self._lock:
            return generate_latest(self._registry)
