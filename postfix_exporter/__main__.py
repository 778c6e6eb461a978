"""Run the postfix exporter."""

from __future__ import annotations

import asyncio
import logging
import signal
import sys

from .config import ExporterSettings
from .server import ExporterServer

_LOGGER = logging.getLogger(__name__)


async def run(settings: ExporterSettings) -> int:
    """Serve until SIGINT or SIGTERM and return the exit code."""
    server = ExporterServer(settings)
    stop = asyncio.Event()

    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(signum, stop.set)

    await server.start()
    try:
        await stop.wait()
    finally:
        _LOGGER.info("Shutdown postfix exporter")
        await server.stop()
        for signum in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(signum)

    return 1 if server.crashed else 0


def main() -> None:
    """Entry point."""
    settings = ExporterSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s (%(threadName)s) [%(name)s] %(message)s",
    )
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
