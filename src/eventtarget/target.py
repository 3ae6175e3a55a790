"""
The location error events are sent to: either the Cloud Logging API, from
which they are picked up by Error Reporting, or the Error Reporting API itself.

See https://cloud.google.com/error-reporting/docs/formatting-error-messages
for the format expected of log entries.
"""

from dataclasses import dataclass
import enum
import typing as t

from google.api import monitored_resource_pb2
from google.cloud.errorreporting_v1beta1 import ReportErrorsServiceClient
from google.cloud.logging_v2.services.logging_service_v2 import (
    LoggingServiceV2Client,
)

from eventtarget import core, logging
from eventtarget.config import error_reporting as config
from eventtarget.log_target import LogTarget

__all__ = (
    "EventTarget",
    "EventTargetKind",
    "LOG_NAME_DEFAULT",
    "from_config",
    "global_resource",
)


LOG_NAME_DEFAULT = "stackdriver-error-reporting"

MonitoredResource: t.TypeAlias = monitored_resource_pb2.MonitoredResource

LoggingClientFactory: t.TypeAlias = t.Callable[[], LoggingServiceV2Client]
ErrorReportingClientFactory: t.TypeAlias = t.Callable[
    [],
    ReportErrorsServiceClient,
]


logger = logging.get_logger(__name__)


class EventTargetKind(enum.Enum):
    # Cloud Error Reporting API
    ERROR_REPORTING = "error_reporting"
    # Cloud Logging API
    LOGGING = "logging"


def global_resource() -> MonitoredResource:
    """
    Returns a new `global` monitored resource.

    Protobuf messages are mutable, so every caller gets its own.
    """
    return MonitoredResource(type="global")


def default_logging_client() -> LoggingServiceV2Client:
    logger.debug("event-target.client.create", backend="logging")

    return LoggingServiceV2Client()


def default_error_reporting_client() -> ReportErrorsServiceClient:
    logger.debug("event-target.client.create", backend="error_reporting")

    return ReportErrorsServiceClient()


_LOGGING_FIELDS = (
    "logging_client",
    "log_target",
    "log_name",
    "monitored_resource",
)
_ERROR_REPORTING_FIELDS = ("error_reporting_client",)


@dataclass(frozen=True, kw_only=True, slots=True, eq=False)
class EventTarget:
    """
    Represents where error events are sent.

    Use `for_project`, `for_log_target` or `for_error_reporting` rather than
    the constructor. Only the fields belonging to `kind` are set, the others
    are always None.
    """

    kind: EventTargetKind

    # set when kind is ERROR_REPORTING
    error_reporting_client: ReportErrorsServiceClient | None = None

    # set when kind is LOGGING
    logging_client: LoggingServiceV2Client | None = None
    # where to log to, such as a project or organization
    log_target: LogTarget | None = None
    log_name: str | None = None
    monitored_resource: MonitoredResource | None = None

    def __post_init__(self) -> None:
        match self.kind:
            case EventTargetKind.LOGGING:
                required, unset = _LOGGING_FIELDS, _ERROR_REPORTING_FIELDS
            case EventTargetKind.ERROR_REPORTING:
                required, unset = _ERROR_REPORTING_FIELDS, _LOGGING_FIELDS
            case _:
                raise core.InvalidArgument("kind", f"unknown kind: {self.kind!r}")

        for name in required:
            core.check_not_none(getattr(self, name), name)

        for name in unset:
            if getattr(self, name) is not None:
                raise core.InvalidArgument(
                    name,
                    f"{name} cannot be set for {self.kind.value} targets",
                )

    @classmethod
    def for_project(
        cls,
        project_id: str | None,
        log_name: str | None = LOG_NAME_DEFAULT,
        logging_client: LoggingServiceV2Client | None = None,
        monitored_resource: MonitoredResource | None = None,
        *,
        client_factory: LoggingClientFactory = default_logging_client,
    ) -> "EventTarget":
        """
        Create a target that writes error events to the Cloud Logging API
        under the given project.

        :param project_id: The GCP project ID. Cannot be None or empty.
        :param log_name: The log name. Cannot be None or empty.
        :param logging_client: The logging client. If not supplied, one is
            created with `client_factory`.
        :param monitored_resource: The resource to monitor. Defaults to the
            `global` resource.
        """
        return cls.for_log_target(
            LogTarget.for_project(project_id),
            log_name,
            logging_client,
            monitored_resource,
            client_factory=client_factory,
        )

    @classmethod
    def for_log_target(
        cls,
        log_target: LogTarget | None,
        log_name: str | None = LOG_NAME_DEFAULT,
        logging_client: LoggingServiceV2Client | None = None,
        monitored_resource: MonitoredResource | None = None,
        *,
        client_factory: LoggingClientFactory = default_logging_client,
    ) -> "EventTarget":
        """
        Create a target that writes error events to the Cloud Logging API.

        :param log_target: Where to log to, such as a project or organization.
            Cannot be None.
        :param log_name: The log name. Cannot be None or empty.
        :param logging_client: The logging client. If not supplied, one is
            created with `client_factory`.
        :param monitored_resource: The resource to monitor. Defaults to the
            `global` resource.
        """
        # validate before creating a client, it may open a channel
        log_target = core.check_not_none(log_target, "log_target")
        log_name = core.check_not_empty(log_name, "log_name")

        if logging_client is None:
            logging_client = client_factory()

        if monitored_resource is None:
            monitored_resource = global_resource()

        return cls(
            kind=EventTargetKind.LOGGING,
            logging_client=logging_client,
            log_target=log_target,
            log_name=log_name,
            monitored_resource=monitored_resource,
        )

    @classmethod
    def for_error_reporting(
        cls,
        error_reporting_client: ReportErrorsServiceClient | None = None,
        *,
        client_factory: ErrorReportingClientFactory = (
            default_error_reporting_client
        ),
    ) -> "EventTarget":
        """
        Create a target that reports error events to the Error Reporting API.

        The API must be enabled for the project, see
        https://console.cloud.google.com/apis/api/clouderrorreporting.googleapis.com/overview

        :param error_reporting_client: The error reporting client. If not
            supplied, one is created with `client_factory`.
        """
        if error_reporting_client is None:
            error_reporting_client = client_factory()

        return cls(
            kind=EventTargetKind.ERROR_REPORTING,
            error_reporting_client=error_reporting_client,
        )

    @property
    def is_logging(self) -> bool:
        return self.kind is EventTargetKind.LOGGING

    @property
    def is_error_reporting(self) -> bool:
        return self.kind is EventTargetKind.ERROR_REPORTING

    @property
    def full_log_name(self) -> str | None:
        """
        The full name of the log entries are written to, or None for error
        reporting targets.
        """
        if self.log_target is None:
            return None

        return self.log_target.full_log_name(self.log_name)

    def describe(self) -> t.Dict[str, t.Any]:
        """
        Returns the fields of this target that are safe to bind to a logger.
        """
        ret: t.Dict[str, t.Any] = {"kind": self.kind.value}

        if self.is_logging:
            assert self.monitored_resource is not None

            ret["log_name"] = self.full_log_name
            ret["resource_type"] = self.monitored_resource.type

        return ret


def monitored_resource(cfg: config.Logging) -> MonitoredResource:
    """
    Build the monitored resource described by the config.
    """
    resource_type = core.check_not_empty(cfg.resource_type, "resource_type")

    return MonitoredResource(
        type=resource_type,
        labels=cfg.resource_labels or {},
    )


def from_config(
    cfg: config.Config,
    *,
    logging_client_factory: LoggingClientFactory = default_logging_client,
    error_reporting_client_factory: ErrorReportingClientFactory = (
        default_error_reporting_client
    ),
) -> EventTarget:
    """
    Create the target described by the config.
    """
    match cfg.kind:
        case "error_reporting":
            ret = EventTarget.for_error_reporting(
                client_factory=error_reporting_client_factory,
            )
        case "logging":
            log_cfg = core.check_not_none(cfg.logging, "logging")

            match (log_cfg.project_id, log_cfg.organization_id):
                case (None, None):
                    raise core.InvalidArgument(
                        "project_id",
                        "one of project_id or organization_id must be set",
                    )
                case (project_id, None):
                    log_target = LogTarget.for_project(project_id)
                case (None, organization_id):
                    log_target = LogTarget.for_organization(organization_id)
                case _:
                    raise core.InvalidArgument(
                        "organization_id",
                        "only one of project_id or organization_id can be set",
                    )

            ret = EventTarget.for_log_target(
                log_target,
                log_cfg.log_name,
                monitored_resource=monitored_resource(log_cfg),
                client_factory=logging_client_factory,
            )
        case _:
            raise core.InvalidArgument("kind", f"unknown kind: {cfg.kind!r}")

    logger.info("event-target.configured", **ret.describe())

    return ret
