"""Test the exporter settings."""

import pytest
from pydantic import ValidationError

from postfix_exporter.config import ExporterSettings
from postfix_exporter.const import DEFAULT_PID_FILE, DEFAULT_PORT, DEFAULT_SPOOL_DIR


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the settings without environment."""
    monkeypatch.delenv("POSTFIX_EXPORTER_SYSLOG_SOCKET", raising=False)

    settings = ExporterSettings()

    assert settings.spool_dir == DEFAULT_SPOOL_DIR
    assert settings.pid_file == DEFAULT_PID_FILE
    assert settings.port == DEFAULT_PORT
    assert settings.syslog_socket is None
    assert settings.listen_hosts == ["0.0.0.0", "::"]
    assert settings.size_interval == 5
    assert settings.age_interval == 60


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings from environment variables."""
    monkeypatch.setenv("POSTFIX_EXPORTER_SYSLOG_SOCKET", "/run/postfix-exporter.sock")
    monkeypatch.setenv("POSTFIX_EXPORTER_PORT", "9999")
    monkeypatch.setenv("POSTFIX_EXPORTER_LISTEN_HOSTS", '["::1"]')
    monkeypatch.setenv("POSTFIX_EXPORTER_AGE_INTERVAL", "120")

    settings = ExporterSettings()

    assert settings.syslog_socket == "/run/postfix-exporter.sock"
    assert settings.port == 9999
    assert settings.listen_hosts == ["::1"]
    assert settings.age_interval == 120


def test_invalid_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that intervals must be positive."""
    monkeypatch.setenv("POSTFIX_EXPORTER_SIZE_INTERVAL", "0")

    with pytest.raises(ValidationError):
        ExporterSettings()
