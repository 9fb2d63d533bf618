"""Custom exceptions for job notifications."""

from __future__ import annotations


class KubeJobNotifierError(Exception):
    """Base exception for kube-job-notifier errors."""

    pass


class MissingRequiredConfigError(KubeJobNotifierError):
    """Raised when a required configuration value is missing."""

    pass


class MessageTemplateError(KubeJobNotifierError):
    """Raised when the notification message cannot be rendered."""

    pass


class NotificationDeliveryError(KubeJobNotifierError):
    """Raised when a notification backend rejects or fails a request."""

    def __init__(
        self,
        message: str,
        *,
        channel: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.channel = channel
        self.cause = cause


class UploadError(NotificationDeliveryError):
    """Raised when a job log cannot be uploaded to the chat backend."""


class DeliveryError(NotificationDeliveryError):
    """Raised when a chat message or a service check cannot be sent."""
