"""Postfix exporter server."""

from .http import MetricsServer, create_app
from .run import ExporterServer

__all__ = ["ExporterServer", "MetricsServer", "create_app"]
