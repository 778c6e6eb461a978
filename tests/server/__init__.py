"""Tests for the exporter server."""
