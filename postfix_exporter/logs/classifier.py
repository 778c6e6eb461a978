"""Classify postfix log lines and fold them into metrics."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
import re

from ..metrics import LogMetrics, MetricsRegistry

# smtpd runs as postfix/smtpd or below a service name (postfix/submission/smtpd)
_SMTPD = r"postfix(?:/[\w.-]+)*/smtpd\[\d+\]"
_DSN = r"\d\.\d{1,3}\.\d{1,3}"

QUEUED_DSN = "2.0.0"
TERMINAL_STATUSES = frozenset({"sent", "bounced"})


class EventType(str, Enum):
    """Classified log line types."""

    DELAY = "delay"
    CONNECT = "connect"
    DISCONNECT = "disconnect"
    QUEUED = "queued"
    NOQUEUE = "noqueue"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True)
class LogEvent:
    """Result of classifying one log line."""

    type: EventType
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class EventPattern:
    """Map a regular expression to an event type."""

    type: EventType
    regex: re.Pattern[str]

    def match(self, line: str) -> LogEvent | None:
        """Return the event if the line matches."""
        if match := self.regex.search(line):
            return LogEvent(self.type, match.groupdict())
        return None


# Evaluated in order, the first match wins
PATTERNS: tuple[EventPattern, ...] = (
    EventPattern(
        EventType.DELAY,
        re.compile(
            r"\bdelay=(?P<delay>\d+(?:\.\d+)?),.*"
            rf"\bdsn=(?P<dsn>{_DSN}), status=(?P<status>\w+)",
        ),
    ),
    EventPattern(EventType.CONNECT, re.compile(rf"{_SMTPD}: connect from ")),
    EventPattern(EventType.DISCONNECT, re.compile(rf"{_SMTPD}: disconnect from ")),
    EventPattern(
        EventType.QUEUED,
        re.compile(rf"{_SMTPD}: (?P<queue_id>[0-9A-Za-z]+): client="),
    ),
    EventPattern(
        EventType.NOQUEUE,
        re.compile(rf"{_SMTPD}: NOQUEUE: reject: .*?: \d{{3}} (?P<dsn>{_DSN}) "),
    ),
)


def classify(line: str, patterns: Sequence[EventPattern] = PATTERNS) -> LogEvent:
    """Return the event of the first matching pattern."""
    for pattern in patterns:
        if event := pattern.match(line):
            return event
    return LogEvent(EventType.IGNORED)


class LogEventProcessor:
    """Update the log metrics from log lines."""

    def __init__(
        self,
        registry: MetricsRegistry,
        metrics: LogMetrics,
        patterns: Sequence[EventPattern] = PATTERNS,
    ) -> None:
        """Initialize processor."""
        self._registry = registry
        self._metrics = metrics
        self._patterns = patterns
        self._handlers: dict[EventType, Callable[[LogEvent], None]] = {
            EventType.DELAY: self._handle_delay,
            EventType.CONNECT: self._handle_connect,
            EventType.DISCONNECT: self._handle_disconnect,
            EventType.QUEUED: self._handle_queued,
            EventType.NOQUEUE: self._handle_noqueue,
        }

    def process(self, line: str) -> LogEvent:
        """Classify a line and update the metrics."""
        event = classify(line, self._patterns)

        if handler := self._handlers.get(event.type):
            handler(event)

        self._registry.increment(
            self._metrics.log_messages,
            labels={"type": event.type.value},
        )
        return event

    def _handle_delay(self, event: LogEvent) -> None:
        # Deferred and other non terminal states would skew the distribution
        status = event.fields["status"]
        if status not in TERMINAL_STATUSES:
            return

        self._registry.observe(
            self._metrics.delivery_delays,
            float(event.fields["delay"]),
            {"dsn": event.fields["dsn"], "status": status},
        )

    def _handle_connect(self, event: LogEvent) -> None:
        self._registry.increment(self._metrics.smtpd_connections)
        self._registry.adjust(self._metrics.smtpd_active_connections, 1)

    def _handle_disconnect(self, event: LogEvent) -> None:
        # Started mid stream, a disconnect may have no matching connect
        self._registry.adjust(self._metrics.smtpd_active_connections, -1, floor=0)

    def _handle_queued(self, event: LogEvent) -> None:
        self._registry.increment(
            self._metrics.delivery_attempts,
            labels={"dsn": QUEUED_DSN, "status": "queued"},
        )

    def _handle_noqueue(self, event: LogEvent) -> None:
        self._registry.increment(
            self._metrics.delivery_attempts,
            labels={"dsn": event.fields["dsn"], "status": "rejected"},
        )
