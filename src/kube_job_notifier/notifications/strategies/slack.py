# -*- coding: utf-8 -*-
"""Slack notification strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from slack_sdk import WebClient
from slack_sdk.errors import SlackClientError

from kube_job_notifier.exceptions import DeliveryError, MessageTemplateError, UploadError
from kube_job_notifier.models import MessageTemplateParam
from kube_job_notifier.notifications.types import Attachment, AttachmentColor, JobEvent

if TYPE_CHECKING:
    from kube_job_notifier.config.config import Settings
    from kube_job_notifier.notifications.types import NotificationStyler


_EVENT_STYLES: dict[JobEvent, tuple[AttachmentColor, str]] = {
    JobEvent.START: (AttachmentColor.NORMAL, "Job Start"),
    JobEvent.SUCCESS: (AttachmentColor.NORMAL, "Job Success"),
    JobEvent.FAILED: (AttachmentColor.DANGER, "Job Failed"),
}


class SlackNotifier:
    """Post job lifecycle notifications to Slack using slack_sdk.

    Start and success go to SLACK_SUCCEED_CHANNEL, failures to
    SLACK_FAILED_CHANNEL; both fall back to SLACK_CHANNEL when unset.
    Every call is a single attempt: errors are logged and raised.
    """

    def __init__(
        self,
        settings: "Settings",
        styler: "NotificationStyler",
        *,
        client: Optional[WebClient] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._styler: "NotificationStyler" = styler

        cfg = settings.slack
        token = settings.require_slack_token()
        self.username: str = cfg.username
        self._channels: dict[JobEvent, str] = {
            JobEvent.START: cfg.succeed_channel or cfg.channel,
            JobEvent.SUCCESS: cfg.succeed_channel or cfg.channel,
            JobEvent.FAILED: cfg.failed_channel or cfg.channel,
        }
        self._client = client if client is not None else WebClient(token=token)

    def channel_for(self, event: JobEvent) -> str:
        """Return the channel notifications for event are posted to."""
        return self._channels[event]

    def notify_start(self, param: MessageTemplateParam) -> None:
        """Announce that a job started. Never uploads logs."""
        self._send(JobEvent.START, param, upload_log=False)

    def notify_success(self, param: MessageTemplateParam) -> None:
        """Announce a successful job, uploading its log first when present."""
        self._send(JobEvent.SUCCESS, param, upload_log=True)

    def notify_failed(self, param: MessageTemplateParam) -> None:
        """Announce a failed job, uploading its log first when present."""
        self._send(JobEvent.FAILED, param, upload_log=True)

    def _send(self, event: JobEvent, param: MessageTemplateParam, *, upload_log: bool) -> None:
        channel = self.channel_for(event)
        if upload_log and param.log:
            file = self._upload_log(channel, param)
            param = param.with_log(file["permalink"])

        try:
            text = self._styler.render(param)
        except MessageTemplateError as exc:
            self._logger.error(
                "slack_message_render_failed",
                job_event=event.value,
                job_name=param.job_name,
                error_message=str(exc),
            )
            raise

        color, title = _EVENT_STYLES[event]
        self._notify(channel, Attachment(color=color, title=title, text=text))

    def _notify(self, channel: str, attachment: Attachment) -> tuple[str, str]:
        """Post the attachment and return (channel_id, timestamp)."""
        try:
            response = self._client.chat_postMessage(
                channel=channel,
                text="",
                attachments=[attachment.to_payload()],
                username=self.username or None,
            )
        except (SlackClientError, OSError) as exc:
            self._logger.error(
                "slack_message_failed",
                slack_channel=channel,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise DeliveryError(
                f"Failed to post message to {channel}: {exc}",
                channel=channel,
                cause=exc,
            ) from exc

        channel_id = response.get("channel", "")
        timestamp = response.get("ts", "")
        self._logger.info(
            "slack_message_sent",
            slack_channel_id=channel_id,
            slack_ts=timestamp,
        )
        return channel_id, timestamp

    def _upload_log(self, channel: str, param: MessageTemplateParam) -> dict[str, Any]:
        """Upload raw log text as a file and return its metadata (with permalink)."""
        title = f"{param.namespace}_{param.job_name}"
        try:
            response = self._client.files_upload_v2(
                title=title,
                filename=f"{title}.txt",
                content=param.log,
                snippet_type="text",
                channel=channel,
            )
        except (SlackClientError, OSError) as exc:
            self._logger.error(
                "slack_upload_failed",
                slack_channel=channel,
                file_title=title,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise UploadError(
                f"Failed to upload log {title} to {channel}: {exc}",
                channel=channel,
                cause=exc,
            ) from exc

        file = response.get("file") or {}
        if not file.get("permalink"):
            self._logger.error("slack_upload_missing_permalink", file_title=title)
            raise UploadError(
                f"Upload of {title} returned no permalink",
                channel=channel,
            )
        self._logger.info(
            "slack_upload_succeeded",
            file_name=file.get("name") or title,
            slack_channel=channel,
        )
        return file
