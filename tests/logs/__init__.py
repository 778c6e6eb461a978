"""Tests for log ingestion."""
