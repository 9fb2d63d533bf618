"""Configuration subpackage."""

from kube_job_notifier.config.config import (
    AppSettings,
    DatadogSettings,
    LoggingSettings,
    Settings,
    SlackSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DatadogSettings",
    "LoggingSettings",
    "Settings",
    "SlackSettings",
    "get_settings",
]
