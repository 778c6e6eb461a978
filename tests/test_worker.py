"""Test the periodic worker thread."""

from threading import Event

import pytest

from postfix_exporter.worker import PeriodicWorker


class CountingWorker(PeriodicWorker):
    """Worker that counts its cycles."""

    def __init__(self) -> None:
        super().__init__("counting", 0.01)
        self.cycles = 0
        self.done = Event()

    def run_once(self) -> None:
        self.cycles += 1
        if self.cycles == 3:
            self.done.set()


def test_worker_without_cycle() -> None:
    """Test that a worker must implement a cycle."""
    with pytest.raises(TypeError):
        PeriodicWorker("broken", 1)  # type: ignore[abstract]


def test_worker_updown() -> None:
    """Test start, cycles and stop of a worker."""
    worker = CountingWorker()
    worker.start()

    assert worker.done.wait(3)
    worker.stop()

    assert not worker.is_alive()
    assert worker.cycles >= 3
