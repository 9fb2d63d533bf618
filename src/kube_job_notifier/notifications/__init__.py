"""Notification subsystem."""

from kube_job_notifier.notifications.notification_manager import (
    JobNotificationService,
)
from kube_job_notifier.notifications.strategies import (
    DatadogNotifier,
    SlackNotifier,
)
from kube_job_notifier.notifications.stylers import SlackMessageStyler
from kube_job_notifier.notifications.types import (
    Attachment,
    AttachmentColor,
    JobEvent,
    NotificationStyler,
)

__all__ = [
    "Attachment",
    "AttachmentColor",
    "DatadogNotifier",
    "JobEvent",
    "JobNotificationService",
    "NotificationStyler",
    "SlackMessageStyler",
    "SlackNotifier",
]
