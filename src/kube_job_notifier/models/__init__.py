"""Domain models."""

from kube_job_notifier.models.job import JobInfo, MessageTemplateParam

__all__ = ["JobInfo", "MessageTemplateParam"]
