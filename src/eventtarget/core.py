import typing as t


__all__ = (
    "InvalidArgument",
    "check_not_none",
    "check_not_empty",
)


T = t.TypeVar("T")


class InvalidArgument(ValueError):
    """
    Raised when a required argument is missing or empty.

    The name of the offending argument is available as `name`.
    """

    name: str

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"{name} must be provided")

        self.name = name


def check_not_none(value: T | None, name: str) -> T:
    """
    Return `value`, or raise `InvalidArgument` if it is None.
    """
    if value is None:
        raise InvalidArgument(name, f"{name} cannot be None")

    return value


def check_not_empty(value: str | None, name: str) -> str:
    """
    Return `value`, or raise `InvalidArgument` if it is None or empty.
    """
    if value is None:
        raise InvalidArgument(name, f"{name} cannot be None")

    if value == "":
        raise InvalidArgument(name, f"{name} cannot be empty")

    return value
