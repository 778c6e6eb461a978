"""Sample the age of the oldest message per queue."""

from __future__ import annotations

import logging
import os
import time

from ..const import AGE_SAMPLE_INTERVAL, QUEUE_LAYOUT
from ..metrics import MetricsRegistry, QueueMetrics
from ..worker import PeriodicWorker
from .spool import oldest_queue_entry

_LOGGER = logging.getLogger(__name__)


class QueueAgeSampler(PeriodicWorker):
    """Publish the change time of the oldest message per queue.

    An empty queue publishes the current time. A series can't be retracted
    from the registry, so this replaces a stale old timestamp with one that
    reads as zero backlog.
    """

    def __init__(
        self,
        registry: MetricsRegistry,
        metrics: QueueMetrics,
        spool_dir: str,
        interval: float = AGE_SAMPLE_INTERVAL,
        queues: dict[str, int] | None = None,
    ) -> None:
        """Initialize sampler."""
        super().__init__("QueueAgeSampler", interval)
        self._registry = registry
        self._metrics = metrics
        self._spool_dir = spool_dir
        self._queues = queues or QUEUE_LAYOUT

    def run_once(self) -> None:
        """Set the oldest message gauge of every queue."""
        for queue, depth in self._queues.items():
            try:
                oldest = oldest_queue_entry(
                    os.path.join(self._spool_dir, queue),
                    depth,
                    now=time.time(),
                )
            except Exception as err:  # noqa: BLE001
                _LOGGER.exception("Can't stat messages in queue %s", queue)
                self._registry.increment(
                    self._metrics.processing_errors,
                    labels={"class": type(err).__name__, "phase": "stat"},
                )
                continue

            self._registry.set(self._metrics.oldest_message, oldest, {"queue": queue})
