"""Sample queue sizes and the master process liveness."""

from __future__ import annotations

import logging
import os

from ..const import QUEUE_LAYOUT, SIZE_SAMPLE_INTERVAL
from ..metrics import MetricsRegistry, QueueMetrics
from ..worker import PeriodicWorker
from .liveness import master_is_running
from .spool import count_queue_entries

_LOGGER = logging.getLogger(__name__)


class QueueSizeSampler(PeriodicWorker):
    """Publish the number of messages per queue and the up gauge."""

    def __init__(
        self,
        registry: MetricsRegistry,
        metrics: QueueMetrics,
        spool_dir: str,
        pid_file: str,
        interval: float = SIZE_SAMPLE_INTERVAL,
        queues: dict[str, int] | None = None,
    ) -> None:
        """Initialize sampler."""
        super().__init__("QueueSizeSampler", interval)
        self._registry = registry
        self._metrics = metrics
        self._spool_dir = spool_dir
        self._pid_file = pid_file
        self._queues = queues or QUEUE_LAYOUT

    def run_once(self) -> None:
        """Sample all queues, then the liveness."""
        self.sample_sizes()
        self.check_liveness()

    def sample_sizes(self) -> None:
        """Set the size gauge of every queue."""
        for queue, depth in self._queues.items():
            try:
                size = count_queue_entries(os.path.join(self._spool_dir, queue), depth)
            except Exception as err:  # noqa: BLE001
                _LOGGER.exception("Can't count messages in queue %s", queue)
                self._count_error(err, "scan")
                continue

            self._registry.set(self._metrics.queue_size, size, {"queue": queue})

    def check_liveness(self) -> None:
        """Set the up gauge from the master PID file."""
        try:
            alive = master_is_running(self._pid_file)
        except Exception as err:  # noqa: BLE001
            _LOGGER.exception("Can't check postfix master liveness")
            self._count_error(err, "up")
            return

        self._registry.set(self._metrics.up, 1 if alive else 0)

    def _count_error(self, err: Exception, phase: str) -> None:
        self._registry.increment(
            self._metrics.processing_errors,
            labels={"class": type(err).__name__, "phase": phase},
        )
