import logging
import sys
import typing as t

import structlog


Logger: t.TypeAlias = structlog.stdlib.BoundLogger


class LoggingConfig(t.TypedDict):
    level: int


# the google client libraries are chatty while creating channels and resolving
# credentials
LOGGERS: t.Dict[str, LoggingConfig] = {
    "urllib3.connectionpool": {
        "level": logging.WARNING,
    },
    "google.auth._default": {
        "level": logging.WARNING,
    },
    "google.auth.transport.requests": {
        "level": logging.WARNING,
    },
    "grpc._cython.cygrpc": {
        "level": logging.WARNING,
    },
}


def get_logger(name: str) -> Logger:
    """
    Get a logger with the given name.
    """
    return t.cast(Logger, structlog.getLogger(name))


def structlog_processors() -> t.List:
    """
    Get the structlog processors to use.
    """
    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if sys.stderr.isatty():
        return shared_processors + [
            structlog.dev.ConsoleRenderer(),
        ]

    # JSON with structured stack traces, e.g. when running on Cloud Run
    return shared_processors + [
        structlog.processors.format_exc_info,
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def configure(loggers: t.Dict[str, LoggingConfig] | None = None) -> None:
    """
    Configure structlog and quiet the google transport loggers.

    :param loggers: Extra per-logger levels, applied after the defaults.
    """
    structlog.configure(
        processors=structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    levels = {**LOGGERS, **(loggers or {})}

    for name, config in levels.items():
        logging.getLogger(name).setLevel(config["level"])
