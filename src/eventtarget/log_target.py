"""
Where log entries are addressed, such as a project or an organization.
"""

from dataclasses import dataclass
import enum
import typing as t
from urllib import parse

from google.cloud.logging_v2.services.logging_service_v2 import (
    LoggingServiceV2Client,
)

from eventtarget import core

__all__ = (
    "LogTarget",
    "LogTargetKind",
)


class LogTargetKind(enum.Enum):
    PROJECT = "project"
    ORGANIZATION = "organization"


@dataclass(frozen=True, kw_only=True, slots=True)
class LogTarget:
    # whether `id` names a project or an organization
    kind: LogTargetKind
    # the GCP project ID or the numeric organization ID
    id: str

    @classmethod
    def for_project(cls, project_id: str | None) -> "LogTarget":
        """
        Create a target for the given GCP project.
        """
        return cls(
            kind=LogTargetKind.PROJECT,
            id=core.check_not_empty(project_id, "project_id"),
        )

    @classmethod
    def for_organization(cls, organization_id: str | None) -> "LogTarget":
        """
        Create a target for the given GCP organization.
        """
        return cls(
            kind=LogTargetKind.ORGANIZATION,
            id=core.check_not_empty(organization_id, "organization_id"),
        )

    @property
    def resource_name(self) -> str:
        """
        The parent resource name, e.g. `projects/my-project`.
        """
        match self.kind:
            case LogTargetKind.PROJECT:
                return LoggingServiceV2Client.common_project_path(self.id)
            case LogTargetKind.ORGANIZATION:
                return LoggingServiceV2Client.common_organization_path(self.id)
            case _:
                t.assert_never(self.kind)

    def full_log_name(self, log_name: str | None) -> str:
        """
        The full log name as expected by the Logging API, e.g.
        `projects/my-project/logs/my-log`.

        The log name is URL-encoded, so `a/b` becomes `a%2Fb`.
        """
        log_name = core.check_not_empty(log_name, "log_name")

        return f"{self.resource_name}/logs/{parse.quote(log_name, safe='')}"
