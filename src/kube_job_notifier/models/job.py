"""JobInfo and MessageTemplateParam: the records handed over by the job watcher."""

from __future__ import annotations

from dataclasses import dataclass, replace

from kube_job_notifier.utils.naming import normalize_job_name


@dataclass(frozen=True, slots=True)
class JobInfo:
    """Identifies a Kubernetes Job that changed state."""

    name: str
    """Job object name, possibly carrying a generated suffix."""
    namespace: str

    @property
    def job_name(self) -> str:
        """Job name without its generated suffix, used for display and tags."""
        return normalize_job_name(self.name)

    def to_message_param(self, log: str = "") -> MessageTemplateParam:
        """Build the rendering input for this job."""
        return MessageTemplateParam(
            job_name=self.job_name,
            namespace=self.namespace,
            log=log,
        )


@dataclass(frozen=True, slots=True)
class MessageTemplateParam:
    """Rendering input for one notification."""

    job_name: str
    namespace: str = ""
    log: str = ""
    """Raw log content before upload, the file permalink after."""

    def with_log(self, log: str) -> MessageTemplateParam:
        """Return a copy with log replaced."""
        return replace(self, log=log)
