"""Test the postfix master liveness check."""

import os
from unittest.mock import patch

import pytest

from postfix_exporter.exceptions import InvalidPidError
from postfix_exporter.queue import liveness


def _write_pid(spool_dir: str, content: str) -> str:
    pid_file = os.path.join(spool_dir, "pid", "master.pid")
    with open(pid_file, "w", encoding="ascii") as handle:
        handle.write(content)
    return pid_file


def test_read_pid(spool_dir: str) -> None:
    """Test reading the padded postfix PID file."""
    pid_file = _write_pid(spool_dir, "        4242\n")

    assert liveness.read_pid(pid_file) == 4242


@pytest.mark.parametrize(
    "content",
    ["", "abc", "0", "1", "-12", "2147483648", "99999999999999999999"],
)
def test_read_invalid_pid(spool_dir: str, content: str) -> None:
    """Test PID file content without a usable process."""
    pid_file = _write_pid(spool_dir, content)

    with pytest.raises(InvalidPidError):
        liveness.read_pid(pid_file)


def test_master_running(spool_dir: str) -> None:
    """Test a PID file naming a live process."""
    pid_file = _write_pid(spool_dir, f"{os.getpid()}\n")

    assert liveness.master_is_running(pid_file)


def test_master_owned_by_other_user(spool_dir: str) -> None:
    """Test that a permission error counts as alive."""
    pid_file = _write_pid(spool_dir, "4242\n")

    with patch.object(liveness.os, "kill", side_effect=PermissionError) as mock_kill:
        assert liveness.master_is_running(pid_file)

    mock_kill.assert_called_once_with(4242, 0)


def test_master_dead(spool_dir: str) -> None:
    """Test a stale PID file."""
    pid_file = _write_pid(spool_dir, "4242\n")

    with patch.object(liveness.os, "kill", side_effect=ProcessLookupError):
        assert not liveness.master_is_running(pid_file)


def test_master_probe_failure(spool_dir: str) -> None:
    """Test that other probe errors count as down."""
    pid_file = _write_pid(spool_dir, "4242\n")

    with patch.object(liveness.os, "kill", side_effect=OSError("probe failed")):
        assert not liveness.master_is_running(pid_file)


def test_master_pid_file_missing(spool_dir: str) -> None:
    """Test a missing PID file."""
    assert not liveness.master_is_running(os.path.join(spool_dir, "pid", "master.pid"))


def test_master_pid_file_invalid(spool_dir: str) -> None:
    """Test that no signal is sent for an invalid PID."""
    pid_file = _write_pid(spool_dir, "1\n")

    with patch.object(liveness.os, "kill") as mock_kill:
        assert not liveness.master_is_running(pid_file)

    mock_kill.assert_not_called()


def test_process_id_overflow() -> None:
    """Test that a process id too large for the kernel counts as down."""
    with patch.object(liveness.os, "kill", side_effect=OverflowError) as mock_kill:
        assert not liveness.process_exists(2**40)

    mock_kill.assert_called_once_with(2**40, 0)
