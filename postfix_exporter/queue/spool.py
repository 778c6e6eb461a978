"""Walk the postfix spool directories."""

from __future__ import annotations

from collections.abc import Iterator
import os
import time


def iter_queue_entries(path: str, depth: int = 1) -> Iterator[str]:
    """Yield the paths of all entries `depth` levels below path.

    Sharded queues keep messages in hashed subdirectories, there only files
    inside the subdirectories count. A subdirectory removed while walking is
    skipped.
    """
    with os.scandir(path) as entries:
        for entry in entries:
            if depth <= 1:
                yield entry.path
            elif entry.is_dir(follow_symlinks=False):
                try:
                    yield from iter_queue_entries(entry.path, depth - 1)
                except FileNotFoundError:
                    continue


def count_queue_entries(path: str, depth: int = 1) -> int:
    """Return the number of messages in a queue directory."""
    return sum(1 for _ in iter_queue_entries(path, depth))


def oldest_queue_entry(path: str, depth: int = 1, now: float | None = None) -> float:
    """Return the smallest change time of all messages in a queue.

    A message that vanishes between listing and stat (delivered or moved by
    postfix) and an empty queue both report `now`.
    """
    if now is None:
        now = time.time()

    oldest = now
    for entry in iter_queue_entries(path, depth):
        try:
            changed = os.stat(entry, follow_symlinks=False).st_ctime
        except FileNotFoundError:
            changed = now
        oldest = min(oldest, changed)

    return oldest
