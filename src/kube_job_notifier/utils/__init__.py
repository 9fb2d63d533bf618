# -*- coding: utf-8 -*-
"""Utility modules."""

from kube_job_notifier.utils.naming import normalize_job_name

__all__ = ["normalize_job_name"]
