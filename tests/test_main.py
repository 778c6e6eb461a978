"""Test the exporter entry point."""

import os
import signal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from postfix_exporter.__main__ import run
from postfix_exporter.config import ExporterSettings


def _interrupt() -> None:
    os.kill(os.getpid(), signal.SIGINT)


@pytest.mark.asyncio
@pytest.mark.parametrize(("crashed", "exit_code"), [(False, 0), (True, 1)])
async def test_run_exit_code(crashed: bool, exit_code: int) -> None:
    """Test that a crashed worker turns into a failing exit code."""
    server = MagicMock()
    server.start = AsyncMock(side_effect=_interrupt)
    server.stop = AsyncMock()
    server.crashed = crashed

    with patch("postfix_exporter.__main__.ExporterServer", return_value=server):
        assert await run(ExporterSettings()) == exit_code

    server.start.assert_awaited_once()
    server.stop.assert_awaited_once()
