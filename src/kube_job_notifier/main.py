# -*- coding: utf-8 -*-
"""
Entry point for sending a single job lifecycle notification.

The Kubernetes watch that observes Jobs lives outside this package; it calls
JobNotificationService directly. This entry point drives the same service from
the command line, e.g. from a Job's own container or for a manual check:

    python -m kube_job_notifier.main failed --name etl-job-27x9k --namespace data --log-file out.log
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import structlog

from kube_job_notifier.config import get_settings
from kube_job_notifier.DI import Container
from kube_job_notifier.exceptions import KubeJobNotifierError, MissingRequiredConfigError
from kube_job_notifier.logging.config import configure_logging
from kube_job_notifier.models import JobInfo
from kube_job_notifier.notifications.types import JobEvent


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kube-job-notifier",
        description="Send a Kubernetes Job lifecycle notification to Slack and DogStatsD.",
    )
    parser.add_argument("event", choices=[e.value for e in JobEvent])
    parser.add_argument("--name", required=True, help="Job object name.")
    parser.add_argument("--namespace", default="", help="Job namespace.")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="File whose content is attached on success/failure.",
    )
    return parser.parse_args(argv)


def run(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    try:
        settings.require_slack_token()
    except MissingRequiredConfigError:
        logger.error("main_missing_slack_token", message="SLACK_TOKEN is not set")
        raise

    service = Container().job_notification_service()
    job = JobInfo(name=args.name, namespace=args.namespace)
    log = ""
    if args.log_file is not None:
        try:
            log = args.log_file.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error(
                "main_log_file_unreadable",
                log_file=str(args.log_file),
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise

    event = JobEvent(args.event)
    if event is JobEvent.START:
        service.job_started(job)
    elif event is JobEvent.SUCCESS:
        service.job_succeeded(job, log)
    else:
        service.job_failed(job, log)
    logger.info("main_notification_sent", job_event=event.value, job_name=job.job_name)


def main() -> None:
    try:
        run()
    except MissingRequiredConfigError:
        sys.exit(2)
    except (KubeJobNotifierError, OSError):
        sys.exit(1)


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
