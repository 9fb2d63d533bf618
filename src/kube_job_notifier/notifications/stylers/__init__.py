"""Notification stylers."""

from kube_job_notifier.notifications.stylers.slack_message_styler import (
    SlackMessageStyler,
)

__all__ = ["SlackMessageStyler"]
