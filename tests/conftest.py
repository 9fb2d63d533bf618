# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from kube_job_notifier.config import (
    AppSettings,
    DatadogSettings,
    LoggingSettings,
    Settings,
    SlackSettings,
)
from kube_job_notifier.models import JobInfo, MessageTemplateParam


_ENV_PREFIXES = ("SLACK_", "DD_", "APP__", "LOGGING__", "SLACK__", "DATADOG__")


class FakeSlackClient:
    """Records Slack Web API calls (in order) into a shared call log."""

    def __init__(
        self,
        calls: list[tuple[str, dict[str, Any]]],
        *,
        permalink: str = "https://example.slack.com/files/U1/F1/data_etl-job",
        upload_error: Exception | None = None,
        post_error: Exception | None = None,
    ) -> None:
        self.calls = calls
        self.permalink = permalink
        self.upload_error = upload_error
        self.post_error = post_error

    def files_upload_v2(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("files_upload_v2", kwargs))
        if self.upload_error is not None:
            raise self.upload_error
        return {
            "ok": True,
            "file": {"id": "F1", "name": kwargs.get("filename"), "permalink": self.permalink},
        }

    def chat_postMessage(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("chat_postMessage", kwargs))
        if self.post_error is not None:
            raise self.post_error
        return {"ok": True, "channel": "C123", "ts": "1700000000.000100"}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from leaking into settings under test."""
    import os

    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with a Slack token and easy section overrides."""

    def _build(
        *,
        slack: dict[str, Any] | None = None,
        datadog: dict[str, Any] | None = None,
        app: dict[str, Any] | None = None,
        logging: dict[str, Any] | None = None,
    ) -> Settings:
        slack_values: dict[str, Any] = {"token": "xoxb-test", "channel": "#jobs"}
        slack_values.update(slack or {})
        return Settings(
            slack=SlackSettings(**slack_values),
            datadog=DatadogSettings(**(datadog or {})),
            app=AppSettings(**(app or {})),
            logging=LoggingSettings(**(logging or {})),
        )

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def job() -> JobInfo:
    """Job as reported by the watcher, with a generated suffix."""
    return JobInfo(name="etl-job-27x9k", namespace="data")


@pytest.fixture
def param() -> MessageTemplateParam:
    return MessageTemplateParam(job_name="etl-job", namespace="data")


@pytest.fixture
def calls() -> list[tuple[str, dict[str, Any]]]:
    """Shared, ordered record of backend calls."""
    return []


@pytest.fixture
def fake_slack_client_factory(
    calls: list[tuple[str, dict[str, Any]]],
) -> Callable[..., FakeSlackClient]:
    def _build(**kwargs: Any) -> FakeSlackClient:
        return FakeSlackClient(calls, **kwargs)

    return _build
