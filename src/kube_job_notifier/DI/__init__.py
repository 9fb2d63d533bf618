"""Dependency injection."""

from kube_job_notifier.DI.container import Container

__all__ = ["Container"]
