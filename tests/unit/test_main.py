# -*- coding: utf-8 -*-
"""Unit tests for the command-line entry point."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

import kube_job_notifier.main as main_module
from kube_job_notifier.config import Settings
from kube_job_notifier.exceptions import DeliveryError, MissingRequiredConfigError
from kube_job_notifier.models import JobInfo


@pytest.fixture
def service(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> Mock:
    service = Mock()
    container = Mock()
    container.job_notification_service.return_value = service
    monkeypatch.setattr(main_module, "Container", lambda: container)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)
    return service


def test_run_start(service: Mock) -> None:
    main_module.run(["start", "--name", "etl-job-27x9k", "--namespace", "data"])
    service.job_started.assert_called_once_with(JobInfo(name="etl-job-27x9k", namespace="data"))


def test_run_failed_attaches_log_file(service: Mock, tmp_path: Path) -> None:
    log_file = tmp_path / "job.log"
    log_file.write_text("Traceback: boom\n", encoding="utf-8")

    main_module.run(
        ["failed", "--name", "etl-job-27x9k", "--namespace", "data", "--log-file", str(log_file)]
    )

    service.job_failed.assert_called_once_with(
        JobInfo(name="etl-job-27x9k", namespace="data"), "Traceback: boom\n"
    )


def test_run_success_without_log(service: Mock) -> None:
    main_module.run(["success", "--name", "etl-job"])
    service.job_succeeded.assert_called_once_with(JobInfo(name="etl-job", namespace=""), "")


def test_run_rejects_missing_token(
    monkeypatch: pytest.MonkeyPatch,
    settings_factory: Callable[..., Settings],
) -> None:
    monkeypatch.setattr(main_module, "get_settings", lambda: settings_factory(slack={"token": None}))
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)
    container = Mock()
    monkeypatch.setattr(main_module, "Container", container)

    with pytest.raises(MissingRequiredConfigError):
        main_module.run(["start", "--name", "etl-job"])

    container.assert_not_called()


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MissingRequiredConfigError("SLACK_TOKEN"), 2),
        (DeliveryError("post failed"), 1),
    ],
)
def test_main_exit_codes(monkeypatch: pytest.MonkeyPatch, error: Exception, code: int) -> None:
    def _raise(*_args: Any) -> None:
        raise error

    monkeypatch.setattr(main_module, "run", _raise)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == code


def test_run_unreadable_log_file_sends_nothing(service: Mock, tmp_path: Path) -> None:
    missing = tmp_path / "missing.log"

    with pytest.raises(OSError):
        main_module.run(["failed", "--name", "etl-job", "--log-file", str(missing)])

    service.job_failed.assert_not_called()


def test_main_exits_1_for_unreadable_log_file(
    service: Mock,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    missing = tmp_path / "missing.log"
    monkeypatch.setattr(
        main_module.sys,
        "argv",
        ["kube-job-notifier", "success", "--name", "etl-job", "--log-file", str(missing)],
    )

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    service.job_succeeded.assert_not_called()
