"""Tests for queue sampling."""
