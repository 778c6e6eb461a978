"""Postfix exporter metrics registry."""

from .base import MetricHandle, MetricKind, MetricsRegistry
from .definitions import LogMetrics, QueueMetrics
from .prometheus import PrometheusRegistry

__all__ = [
    "LogMetrics",
    "MetricHandle",
    "MetricKind",
    "MetricsRegistry",
    "PrometheusRegistry",
    "QueueMetrics",
]
