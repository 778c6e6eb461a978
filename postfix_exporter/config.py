"""Exporter configuration loaded from the environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import (
    AGE_SAMPLE_INTERVAL,
    DEFAULT_LISTEN_HOSTS,
    DEFAULT_PID_FILE,
    DEFAULT_PORT,
    DEFAULT_SPOOL_DIR,
    LOG_ERROR_BACKOFF,
    SIZE_SAMPLE_INTERVAL,
)


class ExporterSettings(BaseSettings):
    """Runtime configuration sourced from POSTFIX_EXPORTER_* variables.

    Without a syslog socket the log metrics are not declared and no
    listener runs.
    """

    model_config = SettingsConfigDict(env_prefix="POSTFIX_EXPORTER_", extra="ignore")

    spool_dir: str = DEFAULT_SPOOL_DIR
    pid_file: str = DEFAULT_PID_FILE
    syslog_socket: str | None = None
    listen_hosts: list[str] = Field(default_factory=lambda: list(DEFAULT_LISTEN_HOSTS))
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    size_interval: float = Field(default=SIZE_SAMPLE_INTERVAL, gt=0)
    age_interval: float = Field(default=AGE_SAMPLE_INTERVAL, gt=0)
    error_backoff: float = Field(default=LOG_ERROR_BACKOFF, ge=0)
    log_level: str = "INFO"
