"""Shared test fixtures for all test modules."""

import pytest

from eventtarget import target


class FakeLoggingClient:
    """Stands in for LoggingServiceV2Client."""


class FakeErrorReportingClient:
    """Stands in for ReportErrorsServiceClient."""


class Factory:
    """Counts calls and returns a new client each time."""

    def __init__(self, cls: type) -> None:
        self.cls = cls
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.cls()


@pytest.fixture
def logging_factory() -> Factory:
    return Factory(FakeLoggingClient)


@pytest.fixture
def error_reporting_factory() -> Factory:
    return Factory(FakeErrorReportingClient)


@pytest.fixture
def patched_clients(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace the real google client classes used by the default factories."""
    monkeypatch.setattr(target, "LoggingServiceV2Client", FakeLoggingClient)
    monkeypatch.setattr(
        target, "ReportErrorsServiceClient", FakeErrorReportingClient
    )
