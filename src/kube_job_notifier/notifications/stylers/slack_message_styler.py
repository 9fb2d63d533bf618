# -*- coding: utf-8 -*-
"""Slack mrkdwn styler for job notifications."""

from __future__ import annotations

from kube_job_notifier.exceptions import MessageTemplateError
from kube_job_notifier.models import MessageTemplateParam
from kube_job_notifier.notifications.types import NotificationStyler


class SlackMessageStyler(NotificationStyler):
    """Render job name, namespace and log link as bold-labelled lines."""

    def render(self, param: MessageTemplateParam) -> str:
        """Return the message text.

        The JobName line is always present; Namespace and Loglink lines only
        when the matching field is non-empty. Order is fixed.
        """
        rows = [
            ("JobName", param.job_name, True),
            ("Namespace", param.namespace, False),
            ("Loglink", param.log, False),
        ]
        lines: list[str] = []
        for label, value, required in rows:
            if not isinstance(value, str):
                raise MessageTemplateError(
                    f"{label} must be a string, got {type(value).__name__}"
                )
            if value or required:
                lines.append(self._format_row(label, value))
        return "\n".join(lines)

    @staticmethod
    def _format_row(label: str, value: str) -> str:
        return f"*{label}*: {value}"
