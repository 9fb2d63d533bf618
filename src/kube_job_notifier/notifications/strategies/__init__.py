"""Notification strategies."""

from kube_job_notifier.notifications.strategies.datadog import DatadogNotifier
from kube_job_notifier.notifications.strategies.slack import SlackNotifier

__all__ = [
    "DatadogNotifier",
    "SlackNotifier",
]
