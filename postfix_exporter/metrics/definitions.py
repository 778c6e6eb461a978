"""Metrics published by the exporter."""

from __future__ import annotations

from dataclasses import dataclass

from ..const import DELIVERY_DELAY_BUCKETS
from .base import MetricHandle, MetricKind, MetricsRegistry


@dataclass(frozen=True, slots=True)
class QueueMetrics:
    """Handles owned by the queue samplers and the liveness check."""

    start_time: MetricHandle
    oldest_message: MetricHandle
    queue_size: MetricHandle
    processing_errors: MetricHandle
    up: MetricHandle

    @classmethod
    def declare(cls, registry: MetricsRegistry) -> QueueMetrics:
        """Declare the queue metrics on a registry."""
        return cls(
            start_time=registry.declare(
                "exporter_start_time_seconds",
                MetricKind.GAUGE,
                "Unix timestamp of the exporter start",
            ),
            oldest_message=registry.declare(
                "oldest_message_timestamp_seconds",
                MetricKind.GAUGE,
                "Change time of the oldest message in the queue",
                ("queue",),
            ),
            queue_size=registry.declare(
                "queue_size",
                MetricKind.GAUGE,
                "Number of messages in the queue",
                ("queue",),
            ),
            processing_errors=registry.declare(
                "queue_processing_error_total",
                MetricKind.COUNTER,
                "Errors while sampling the queues",
                ("class", "phase"),
            ),
            up=registry.declare(
                "up",
                MetricKind.GAUGE,
                "Whether the postfix master process is running",
            ),
        )


@dataclass(frozen=True, slots=True)
class LogMetrics:
    """Handles owned by the log event classifier."""

    delivery_delays: MetricHandle
    smtpd_connections: MetricHandle
    smtpd_active_connections: MetricHandle
    delivery_attempts: MetricHandle
    log_messages: MetricHandle
    processing_errors: MetricHandle

    @classmethod
    def declare(cls, registry: MetricsRegistry) -> LogMetrics:
        """Declare the log metrics on a registry."""
        return cls(
            delivery_delays=registry.declare(
                "delivery_delays",
                MetricKind.HISTOGRAM,
                "Delivery delays of sent and bounced messages in seconds",
                ("dsn", "status"),
                buckets=DELIVERY_DELAY_BUCKETS,
            ),
            smtpd_connections=registry.declare(
                "smtpd_connections_total",
                MetricKind.COUNTER,
                "Connections accepted by smtpd",
            ),
            smtpd_active_connections=registry.declare(
                "smtpd_active_connections",
                MetricKind.GAUGE,
                "Connections currently open on smtpd",
            ),
            delivery_attempts=registry.declare(
                "incoming_delivery_attempts_total",
                MetricKind.COUNTER,
                "Delivery attempts received by smtpd",
                ("dsn", "status"),
            ),
            log_messages=registry.declare(
                "log_messages_total",
                MetricKind.COUNTER,
                "Log messages received, by classified type",
                ("type",),
            ),
            processing_errors=registry.declare(
                "log_processing_error_total",
                MetricKind.COUNTER,
                "Errors while receiving or processing log messages",
                ("class",),
            ),
        )
