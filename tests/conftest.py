"""Pytest fixtures for the postfix exporter."""

from collections.abc import Generator
import logging
import os
import socket
import tempfile

import pytest

from postfix_exporter.const import QUEUE_LAYOUT
from postfix_exporter.metrics import LogMetrics, PrometheusRegistry, QueueMetrics

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def registry() -> PrometheusRegistry:
    """Create an empty registry."""
    return PrometheusRegistry()


@pytest.fixture
def queue_metrics(registry: PrometheusRegistry) -> QueueMetrics:
    """Declare the queue metrics."""
    return QueueMetrics.declare(registry)


@pytest.fixture
def log_metrics(registry: PrometheusRegistry) -> LogMetrics:
    """Declare the log metrics."""
    return LogMetrics.declare(registry)


@pytest.fixture
def spool_dir(tmp_path) -> str:
    """Create an empty postfix spool with all queue directories."""
    for queue in QUEUE_LAYOUT:
        (tmp_path / queue).mkdir()
    (tmp_path / "pid").mkdir()
    return str(tmp_path)


@pytest.fixture
def socket_path() -> Generator[str, None, None]:
    """Return a short path for a unix socket."""
    with tempfile.TemporaryDirectory(prefix="pfx") as directory:
        yield os.path.join(directory, "syslog.sock")


@pytest.fixture
def unused_port() -> int:
    """Return a free TCP port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
