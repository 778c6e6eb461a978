"""Tests for the metrics registry."""
