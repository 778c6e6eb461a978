"""Postfix exporter runner."""

from __future__ import annotations

import asyncio
from contextlib import suppress
import logging
import os
import signal
import time

from ..config import ExporterSettings
from ..logs import LogListener
from ..metrics import LogMetrics, MetricsRegistry, PrometheusRegistry, QueueMetrics
from ..queue import QueueAgeSampler, QueueSizeSampler
from ..worker import PeriodicWorker
from .http import MetricsServer

_LOGGER = logging.getLogger(__name__)

WATCHDOG_INTERVAL = 1


class ExporterServer:
    """Run the samplers, the log listener and the metrics server."""

    def __init__(
        self,
        settings: ExporterSettings,
        registry: MetricsRegistry | None = None,
    ) -> None:
        """Initialize exporter."""
        self._settings = settings
        self._registry: MetricsRegistry = registry or PrometheusRegistry()
        self._queue_metrics = QueueMetrics.declare(self._registry)
        self._log_metrics: LogMetrics | None = None
        self._workers: list[PeriodicWorker | LogListener] = [
            QueueSizeSampler(
                self._registry,
                self._queue_metrics,
                settings.spool_dir,
                settings.pid_file,
                interval=settings.size_interval,
            ),
            QueueAgeSampler(
                self._registry,
                self._queue_metrics,
                settings.spool_dir,
                interval=settings.age_interval,
            ),
        ]

        if settings.syslog_socket:
            self._log_metrics = LogMetrics.declare(self._registry)
            self._workers.append(
                LogListener(
                    self._registry,
                    self._log_metrics,
                    settings.syslog_socket,
                    error_backoff=settings.error_backoff,
                ),
            )
        else:
            _LOGGER.info("No syslog socket configured, log metrics are disabled")

        self._http = MetricsServer(self._registry, settings.listen_hosts, settings.port)
        self._watchdog: asyncio.Task | None = None
        self._running = False
        self._crashed = False

    @property
    def workers(self) -> list[PeriodicWorker | LogListener]:
        """Return the background workers."""
        return self._workers

    @property
    def crashed(self) -> bool:
        """Return True if a worker died while running."""
        return self._crashed

    async def start(self) -> None:
        """Start workers and the metrics server."""
        self._registry.set(self._queue_metrics.start_time, time.time())

        _LOGGER.info("Run postfix exporter with %d worker", len(self._workers))
        for worker in self._workers:
            worker.start()

        await self._http.start()

        self._running = True
        self._watchdog = asyncio.create_task(self._watch_workers())

    async def stop(self) -> None:
        """Stop the metrics server and all workers."""
        self._running = False
        if self._watchdog and not self._watchdog.done():
            self._watchdog.cancel()
            with suppress(asyncio.CancelledError):
                await self._watchdog

        await self._http.stop()

        loop = asyncio.get_running_loop()
        for worker in self._workers:
            await loop.run_in_executor(None, worker.stop)

    async def _watch_workers(self) -> None:
        """Bring the process down if a worker thread died."""
        while self._running:
            await asyncio.sleep(WATCHDOG_INTERVAL)
            for worker in self._workers:
                if worker.is_alive() or not self._running:
                    continue
                _LOGGER.critical("Worker '%s' crashed!", worker.name)
                self._crashed = True
                os.kill(os.getpid(), signal.SIGINT)
                return
