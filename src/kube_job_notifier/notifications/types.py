"""Notification message types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from kube_job_notifier.models import MessageTemplateParam


class JobEvent(str, Enum):
    """Job lifecycle stage that triggered a notification."""

    START = "start"
    SUCCESS = "success"
    FAILED = "failed"


class AttachmentColor(Enum):
    """Severity of a chat attachment."""

    NORMAL = "Normal"
    WARNING = "Warning"
    DANGER = "Danger"


SLACK_COLORS: dict[AttachmentColor, str] = {
    AttachmentColor.NORMAL: "good",
    AttachmentColor.WARNING: "warning",
    AttachmentColor.DANGER: "danger",
}


@dataclass(frozen=True)
class Attachment:
    """Rendered chat payload for a single notification."""

    color: AttachmentColor
    title: str
    text: str

    def to_payload(self) -> dict[str, Any]:
        """Return the Slack attachment dict."""
        return {
            "color": SLACK_COLORS[self.color],
            "title": self.title,
            "text": self.text,
        }


class NotificationStyler(Protocol):
    """Render template params into the message text."""

    def render(self, param: MessageTemplateParam) -> str:
        """Return the formatted message for the given params.

        Raises:
            MessageTemplateError: If the params cannot be rendered.
        """
        ...
