from .core import InvalidArgument
from .log_target import LogTarget, LogTargetKind
from .target import (
    LOG_NAME_DEFAULT,
    EventTarget,
    EventTargetKind,
    from_config,
    global_resource,
)

__all__ = (
    "EventTarget",
    "EventTargetKind",
    "InvalidArgument",
    "LOG_NAME_DEFAULT",
    "LogTarget",
    "LogTargetKind",
    "from_config",
    "global_resource",
)
