"""Check if the postfix master process is running."""

from __future__ import annotations

import logging
import os

from ..const import MAX_PID
from ..exceptions import InvalidPidError

_LOGGER = logging.getLogger(__name__)


def read_pid(pid_file: str) -> int:
    """Read the process id from a PID file.

    Raise InvalidPidError if the content is no process id above 1 that
    fits into the pid_t of the kernel.
    """
    with open(pid_file, encoding="ascii", errors="replace") as handle:
        content = handle.read().strip()

    try:
        pid = int(content)
    except ValueError as err:
        raise InvalidPidError(f"Invalid PID file content: {content!r}") from err

    if pid <= 1 or pid > MAX_PID:
        raise InvalidPidError(f"Invalid process id {pid}")
    return pid


def process_exists(pid: int) -> bool:
    """Return True if a process with this id exists.

    Signal 0 only checks for existence and permission. A permission error
    means the process exists but belongs to a more privileged user.
    """
    try:
        os.kill(pid, 0)
    except PermissionError:
        return True
    except ProcessLookupError:
        return False
    except (OSError, OverflowError) as err:
        _LOGGER.debug("Can't probe process %d: %s", pid, err)
        return False
    return True


def master_is_running(pid_file: str) -> bool:
    """Return True if the process named in the PID file is alive."""
    try:
        pid = read_pid(pid_file)
    except (OSError, InvalidPidError) as err:
        _LOGGER.debug("No valid master PID: %s", err)
        return False

    return process_exists(pid)
