"""Tests for the postfix exporter."""
