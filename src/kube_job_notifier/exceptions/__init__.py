"""Exceptions subpackage."""

from kube_job_notifier.exceptions.exceptions import (
    DeliveryError,
    KubeJobNotifierError,
    MessageTemplateError,
    MissingRequiredConfigError,
    NotificationDeliveryError,
    UploadError,
)

__all__ = [
    "DeliveryError",
    "KubeJobNotifierError",
    "MessageTemplateError",
    "MissingRequiredConfigError",
    "NotificationDeliveryError",
    "UploadError",
]
