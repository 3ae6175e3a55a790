"""
Contains the configuration for where error events are delivered.
"""

import typing as t

__all__ = (
    "Config",
    "Logging",
)


Kind: t.TypeAlias = t.Literal["logging", "error_reporting"]


class Logging:
    """
    Holds the configuration for writing error events to Cloud Logging.

    Exactly one of `project_id` and `organization_id` must be set.
    """

    # GCP project ID that the log entries are written to.
    project_id: str | None = None
    # GCP organization ID that the log entries are written to.
    organization_id: str | None = None

    # https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry
    log_name: str = "stackdriver-error-reporting"

    # https://cloud.google.com/monitoring/api/resources#tag_global
    resource_type: str = "global"
    resource_labels: t.Dict[str, str] | None = None


class Config:
    # choices are logging | error_reporting
    kind: Kind = "error_reporting"

    # required when kind is "logging"
    logging: Logging | None = None
