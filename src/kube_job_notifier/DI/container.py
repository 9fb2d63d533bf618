# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers
from slack_sdk import WebClient

from kube_job_notifier.config import Settings, get_settings
from kube_job_notifier.notifications.notification_manager import JobNotificationService
from kube_job_notifier.notifications.strategies.datadog import (
    DatadogNotifier,
    build_dogstatsd_client,
)
from kube_job_notifier.notifications.strategies.slack import SlackNotifier
from kube_job_notifier.notifications.stylers.slack_message_styler import SlackMessageStyler


def _build_slack_client(settings: Settings) -> WebClient:
    """Build the Slack Web API client; fails fast without a token."""
    return WebClient(token=settings.require_slack_token())


def _build_datadog_notifier(settings: Settings) -> DatadogNotifier | None:
    if not settings.datadog.enabled:
        return None
    return DatadogNotifier(settings=settings, client=build_dogstatsd_client(settings))


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, Slack and DogStatsD notifiers."""

    config = providers.Callable(get_settings)

    slack_client = providers.Singleton(_build_slack_client, config)

    message_styler = providers.Singleton(SlackMessageStyler)

    slack_notifier = providers.Singleton(
        SlackNotifier,
        settings=config,
        styler=message_styler,
        client=slack_client,
    )

    datadog_notifier = providers.Singleton(_build_datadog_notifier, config)

    job_notification_service = providers.Singleton(
        JobNotificationService,
        slack=slack_notifier,
        datadog=datadog_notifier,
    )
