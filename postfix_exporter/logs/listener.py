"""Receive postfix log lines from a syslog datagram socket."""

from __future__ import annotations

from contextlib import suppress
import errno
import logging
import os
import socket
from threading import Event, Thread

from ..const import LOG_ERROR_BACKOFF, MAX_DATAGRAM_SIZE, RECEIVE_TIMEOUT
from ..metrics import LogMetrics, MetricsRegistry
from .classifier import LogEventProcessor

_LOGGER = logging.getLogger(__name__)


def bind_datagram_socket(path: str) -> socket.socket:
    """Bind a unix datagram socket.

    A socket file left behind by an unclean shutdown is removed and the bind
    retried.
    """
    while True:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
        try:
            sock.bind(path)
        except OSError as err:
            sock.close()
            if err.errno != errno.EADDRINUSE:
                raise
            _LOGGER.warning("Remove stale socket %s", path)
            with suppress(FileNotFoundError):
                os.unlink(path)
            continue

        return sock


class LogListener(Thread):
    """Feed every received datagram into the log event processor."""

    def __init__(
        self,
        registry: MetricsRegistry,
        metrics: LogMetrics,
        path: str,
        error_backoff: float = LOG_ERROR_BACKOFF,
        processor: LogEventProcessor | None = None,
    ) -> None:
        """Initialize listener."""
        super().__init__(name="LogListener", daemon=True)
        self._registry = registry
        self._metrics = metrics
        self._path = path
        self._error_backoff = error_backoff
        self._processor = processor or LogEventProcessor(registry, metrics)
        self._socket: socket.socket | None = None
        self._stopping = Event()

    def start(self) -> None:
        """Bind the socket and start receiving."""
        self._socket = bind_datagram_socket(self._path)
        self._socket.settimeout(RECEIVE_TIMEOUT)
        _LOGGER.info("Listen for log messages on %s", self._path)

        super().start()

    def stop(self, timeout: float | None = 10) -> None:
        """Stop receiving and remove the socket."""
        self._stopping.set()
        if self.is_alive():
            self.join(timeout)

        if self._socket:
            self._socket.close()
            self._socket = None
        with suppress(FileNotFoundError):
            os.unlink(self._path)

    def run(self) -> None:
        """Receive until stopped."""
        assert self._socket is not None, "Socket not bound"

        while not self._stopping.is_set():
            self.receive_once(self._socket)

        _LOGGER.info("Stopped log listener on %s", self._path)

    def receive_once(self, sock: socket.socket) -> None:
        """Receive and process a single message."""
        try:
            data = sock.recv(MAX_DATAGRAM_SIZE)
            self._processor.process(data.decode("utf-8", errors="replace").rstrip("\r\n"))
        except TimeoutError:
            return
        except Exception as err:  # noqa: BLE001
            _LOGGER.exception("Can't process log message")
            self._registry.increment(
                self._metrics.processing_errors,
                labels={"class": type(err).__name__},
            )
            self._stopping.wait(self._error_backoff)
