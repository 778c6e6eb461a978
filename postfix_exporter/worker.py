"""Background worker threads."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from threading import Event, Thread

_LOGGER = logging.getLogger(__name__)


class PeriodicWorker(Thread, ABC):
    """Thread that runs one cycle, then sleeps for an interval."""

    def __init__(self, name: str, interval: float) -> None:
        """Initialize worker."""
        super().__init__(name=name, daemon=True)
        self._interval = interval
        self._stopping = Event()

    @property
    def interval(self) -> float:
        """Return seconds between two cycles."""
        return self._interval

    @abstractmethod
    def run_once(self) -> None:
        """Run a single cycle."""

    def run(self) -> None:
        """Run cycles until stopped."""
        _LOGGER.info("Start worker: %s (interval=%ss)", self.name, self._interval)

        while not self._stopping.is_set():
            self.run_once()
            self._stopping.wait(self._interval)

        _LOGGER.info("Stopped worker: %s", self.name)

    def stop(self, timeout: float | None = 10) -> None:
        """Request a stop and wait for the thread."""
        self._stopping.set()
        if self.is_alive():
            self.join(timeout)
