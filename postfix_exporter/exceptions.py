"""Postfix exporter exceptions."""


class PostfixExporterError(Exception):
    """Base Exception for postfix exporter exceptions."""


class MetricKindError(PostfixExporterError):
    """Raise if an operation does not fit the kind of the metric."""


class InvalidPidError(PostfixExporterError):
    """PID file content is not a usable process id."""
