"""Job notification service: the entry point for lifecycle callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from kube_job_notifier.models import JobInfo
from kube_job_notifier.notifications.strategies import DatadogNotifier, SlackNotifier


@dataclass
class JobNotificationService:
    """Fan job lifecycle transitions out to chat and metrics notifiers.

    Every configured notifier is attempted; the first failure is re-raised
    once all of them ran.
    """

    slack: SlackNotifier
    datadog: DatadogNotifier | None = None
    get_logger: Callable[[str], Any] = field(default=structlog.get_logger)
    _logger: Any = field(init=False)

    def __post_init__(self) -> None:
        self._logger = self.get_logger("JobNotificationService")

    def job_started(self, job: JobInfo) -> None:
        """Notify that job started."""
        param = job.to_message_param()
        self._run(job, [("slack", lambda: self.slack.notify_start(param))])

    def job_succeeded(self, job: JobInfo, log: str = "") -> None:
        """Notify that job completed; log is attached when non-empty."""
        param = job.to_message_param(log)
        steps: list[tuple[str, Callable[[], None]]] = [
            ("slack", lambda: self.slack.notify_success(param)),
        ]
        if self.datadog is not None:
            datadog = self.datadog
            steps.append(("datadog", lambda: datadog.success_event(job)))
        self._run(job, steps)

    def job_failed(self, job: JobInfo, log: str = "") -> None:
        """Notify that job failed; log is attached when non-empty."""
        param = job.to_message_param(log)
        steps: list[tuple[str, Callable[[], None]]] = [
            ("slack", lambda: self.slack.notify_failed(param)),
        ]
        if self.datadog is not None:
            datadog = self.datadog
            steps.append(("datadog", lambda: datadog.fail_event(job)))
        self._run(job, steps)

    def _run(self, job: JobInfo, steps: list[tuple[str, Callable[[], None]]]) -> None:
        first_error: Exception | None = None
        for notifier_name, step in steps:
            try:
                step()
            except Exception as exc:
                self._logger.warning(
                    "job_notification_failed",
                    notifier=notifier_name,
                    job_name=job.job_name,
                    namespace=job.namespace,
                    error_type=type(exc).__name__,
                )
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
        self._logger.debug(
            "job_notification_dispatched",
            job_name=job.job_name,
            namespace=job.namespace,
            notifiers_count=len(steps),
        )
