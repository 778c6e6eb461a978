"""Serve the metrics registry over HTTP."""

from __future__ import annotations

import logging

from aiohttp import hdrs, web
import async_timeout
from prometheus_client import CONTENT_TYPE_LATEST

from ..const import COMPRESSION_THRESHOLD
from ..metrics import MetricsRegistry

_LOGGER = logging.getLogger(__name__)

METRICS_PATH = "/metrics"
NOT_FOUND_TEXT = "404 page not found\n"

REGISTRY_KEY = web.AppKey("registry", MetricsRegistry)


async def handle_metrics(request: web.Request) -> web.Response:
    """Return a snapshot of all series."""
    body = request.app[REGISTRY_KEY].snapshot()

    response = web.Response(body=body, headers={hdrs.CONTENT_TYPE: CONTENT_TYPE_LATEST})
    if len(body) > COMPRESSION_THRESHOLD:
        response.enable_compression()
    return response


async def handle_not_found(request: web.Request) -> web.Response:
    """Answer every unknown path."""
    return web.Response(status=404, text=NOT_FOUND_TEXT)


def create_app(registry: MetricsRegistry) -> web.Application:
    """Create the exporter web application."""
    app = web.Application()
    app[REGISTRY_KEY] = registry
    app.router.add_get(METRICS_PATH, handle_metrics)
    app.router.add_route("*", "/{tail:.*}", handle_not_found)
    return app


class MetricsServer:
    """HTTP listener with one site per address family."""

    def __init__(
        self,
        registry: MetricsRegistry,
        hosts: list[str],
        port: int,
    ) -> None:
        """Initialize metrics server."""
        self._registry = registry
        self._hosts = hosts
        self._port = port
        self._runner: web.AppRunner | None = None

    async def start(self) -> None:
        """Start listening on all hosts."""
        self._runner = web.AppRunner(create_app(self._registry), access_log=None)
        await self._runner.setup()

        # IPv6 sockets are bound v6 only, IPv4 gets its own site
        for host in self._hosts:
            site = web.TCPSite(self._runner, host, self._port)
            await site.start()
            _LOGGER.info("Serve metrics on %s", site.name)

    async def stop(self) -> None:
        """Stop all listeners."""
        if self._runner is None:
            return

        try:
            async with async_timeout.timeout(10):
                await self._runner.cleanup()
        except TimeoutError:
            _LOGGER.error("Timeout while stopping the metrics server")
        self._runner = None
