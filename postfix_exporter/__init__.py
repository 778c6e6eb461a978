"""Prometheus exporter for the postfix queue and smtpd log events."""
