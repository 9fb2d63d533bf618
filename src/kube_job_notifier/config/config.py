# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Slack and DogStatsD sections read their historical flat variables
(SLACK_TOKEN, SLACK_CHANNEL, DD_TAGS, ...). App and logging sections use
nested env vars <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kube_job_notifier.exceptions import MissingRequiredConfigError


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "kube-job-notifier"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/kube_job_notifier.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 7
    log_file_utc: bool = True

    # JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = True

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class SlackSettings(BaseSettings):
    """Slack notifications (from env SLACK_*)."""

    model_config = SettingsConfigDict(
        env_prefix="SLACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token: Optional[str] = Field(default=None, description="Slack bot token (required).")
    channel: str = Field(default="", description="Default channel for every notification.")
    succeed_channel: str = Field(
        default="",
        description="Channel for start and success notifications. Falls back to channel.",
    )
    failed_channel: str = Field(
        default="",
        description="Channel for failure notifications. Falls back to channel.",
    )
    username: str = Field(default="", description="Display name used when posting.")


class DatadogSettings(BaseSettings):
    """DogStatsD service checks (from env DD_*)."""

    model_config = SettingsConfigDict(
        env_prefix="DD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = True
    socket_path: str = Field(
        default="/var/run/datadog/dsd.socket",
        description="Unix socket of the local DogStatsD agent.",
    )
    # Raw string so pydantic-settings does not try to JSON-decode it.
    tags: str = Field(default="", description="Global tags, comma-separated.")
    namespace: str = Field(default="", description="Metric namespace prefix.")

    @computed_field
    @property
    def constant_tags(self) -> list[str]:
        """Parse comma-separated tags into a list of stripped strings."""
        if not self.tags or not self.tags.strip():
            return []
        return [s.strip() for s in self.tags.split(",") if s.strip()]


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    slack: SlackSettings = Field(default_factory=SlackSettings)
    datadog: DatadogSettings = Field(default_factory=DatadogSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(slack={"token": "xoxb-..."}).
        """
        return cls(**overrides)

    def require_slack_token(self) -> str:
        """Return the Slack token or raise if it is not configured.

        Raises:
            MissingRequiredConfigError: If SLACK_TOKEN is unset or blank.
        """
        token = (self.slack.token or "").strip()
        if not token:
            raise MissingRequiredConfigError("SLACK_TOKEN")
        return token


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings."""
    return Settings()
