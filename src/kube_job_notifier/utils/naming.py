"""Job name normalization for display and metric tags."""

from __future__ import annotations

import re

# generateName adds "-" + 5 chars from "bcdfghjklmnpqrstvwxz2456789";
# CronJob adds "-" + scheduled time in minutes since epoch.
_GENERATED_SUFFIX = re.compile(r"-(?:\d{8,}|(?=[a-z0-9]*\d)[a-z0-9]{5})$")


def normalize_job_name(name: str) -> str:
    """Return the job name without its trailing generated-ID suffix.

    "etl-job-27x9k" -> "etl-job", "backup-28413720" -> "backup".
    Names without such a suffix are returned unchanged.
    """
    stripped = _GENERATED_SUFFIX.sub("", name, count=1)
    return stripped or name
