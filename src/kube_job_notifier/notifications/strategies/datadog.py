# -*- coding: utf-8 -*-
"""DogStatsD service-check strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from datadog.dogstatsd import DogStatsd

from kube_job_notifier.exceptions import DeliveryError
from kube_job_notifier.models import JobInfo

if TYPE_CHECKING:
    from kube_job_notifier.config.config import Settings


SERVICE_CHECK_NAME = "kube_job_notifier.job.status"
HOSTNAME = "kube-job-notifier"


def build_dogstatsd_client(settings: "Settings") -> DogStatsd:
    """Build the DogStatsD client on the local agent socket.

    DD_TAGS become constant tags and DD_NAMESPACE the namespace prefix.
    """
    cfg = settings.datadog
    return DogStatsd(
        socket_path=cfg.socket_path,
        constant_tags=cfg.constant_tags or None,
        namespace=cfg.namespace or None,
    )


class DatadogNotifier:
    """Report job outcomes as a binary service check.

    DogStatsD drops packets it cannot write instead of raising, so a send
    counts as failed when the client's writer drop counter moves.
    """

    def __init__(
        self,
        settings: "Settings",
        client: Optional[DogStatsd] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._client = client if client is not None else build_dogstatsd_client(settings)

    def success_event(self, job: JobInfo) -> None:
        """Emit an OK service check for job."""
        self._service_check(job, DogStatsd.OK, "Job succeed")

    def fail_event(self, job: JobInfo) -> None:
        """Emit a CRITICAL service check for job."""
        self._service_check(job, DogStatsd.CRITICAL, "Job failed")

    def _service_check(self, job: JobInfo, status: int, message: str) -> None:
        tags = [
            f"job_name:{job.job_name}",
            f"namespace:{job.namespace}",
        ]
        dropped_before = self._client.packets_dropped_writer
        self._client.service_check(
            SERVICE_CHECK_NAME,
            status,
            tags=tags,
            hostname=HOSTNAME,
            message=message,
        )
        if self._client.packets_dropped_writer > dropped_before:
            self._logger.error(
                "datadog_service_check_dropped",
                job_name=job.job_name,
                namespace=job.namespace,
                service_check_status=status,
            )
            raise DeliveryError(f"Service check for {job.name} was dropped by the DogStatsD client")
        self._logger.info(
            "datadog_service_check_sent",
            job_name=job.job_name,
            namespace=job.namespace,
            service_check_status=status,
        )
