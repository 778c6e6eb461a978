"""Base metrics registry interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class MetricKind(str, Enum):
    """Kind of a declared metric."""

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"


@dataclass(frozen=True, slots=True)
class MetricHandle:
    """Reference to a declared metric."""

    name: str
    kind: MetricKind
    labelnames: tuple[str, ...] = ()


class MetricsRegistry(ABC):
    """Abstract base class for the shared metrics registry.

    Implementations must be safe to use from several threads at once.
    """

    @abstractmethod
    def declare(
        self,
        name: str,
        kind: MetricKind,
        documentation: str,
        labelnames: tuple[str, ...] = (),
        buckets: Sequence[float] | None = None,
    ) -> MetricHandle:
        """
        Declare a metric and return the handle to update it.

        Args:
            name: Metric name (e.g., 'queue_size')
            kind: Counter, gauge, histogram or summary
            documentation: Help text of the metric
            labelnames: Names of the labels every series must carry
            buckets: Upper bounds of histogram buckets, None for defaults
        """

    @abstractmethod
    def set(
        self,
        handle: MetricHandle,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Set a gauge series to a specific value.

        Args:
            handle: Gauge handle
            value: Current value
            labels: Label-set of the series
        """

    @abstractmethod
    def increment(
        self,
        handle: MetricHandle,
        value: float = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter series.

        Args:
            handle: Counter handle
            value: Amount to increment (default: 1), must not be negative
            labels: Label-set of the series
        """

    @abstractmethod
    def observe(
        self,
        handle: MetricHandle,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Record a value in a histogram or summary series.

        Args:
            handle: Histogram or summary handle
            value: Value to record
            labels: Label-set of the series
        """

    @abstractmethod
    def adjust(
        self,
        handle: MetricHandle,
        delta: float,
        labels: dict[str, str] | None = None,
        floor: float | None = 0.0,
    ) -> float:
        """
        Add a signed delta to a gauge series in one atomic step.

        Args:
            handle: Gauge handle
            delta: Signed amount to add
            labels: Label-set of the series
            floor: Lower bound of the result, None for unbounded

        Returns:
            The new value of the series.
        """

    @abstractmethod
    def get(
        self,
        handle: MetricHandle,
        labels: dict[str, str] | None = None,
    ) -> float | None:
        """Return the current value of a series or None if never written."""

    @abstractmethod
    def snapshot(self) -> bytes:
        """Return all series in the text exposition format."""
