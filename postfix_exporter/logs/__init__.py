"""Postfix log event ingestion."""

from .classifier import (
    PATTERNS,
    EventPattern,
    EventType,
    LogEvent,
    LogEventProcessor,
    classify,
)
from .listener import LogListener, bind_datagram_socket

__all__ = [
    "PATTERNS",
    "EventPattern",
    "EventType",
    "LogEvent",
    "LogEventProcessor",
    "LogListener",
    "bind_datagram_socket",
    "classify",
]
