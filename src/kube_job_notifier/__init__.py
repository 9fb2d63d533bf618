"""kube-job-notifier: Slack and DogStatsD notifications for Kubernetes Jobs."""

from kube_job_notifier.config import get_settings
from kube_job_notifier.DI import Container
from kube_job_notifier.models import JobInfo, MessageTemplateParam
from kube_job_notifier.notifications import (
    DatadogNotifier,
    JobNotificationService,
    SlackMessageStyler,
    SlackNotifier,
)

__version__ = "0.1.0"
__all__ = [
    "Container",
    "DatadogNotifier",
    "JobInfo",
    "JobNotificationService",
    "MessageTemplateParam",
    "SlackMessageStyler",
    "SlackNotifier",
    "get_settings",
]
