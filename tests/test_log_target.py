"""Tests for LogTarget."""

import dataclasses

import pytest

from eventtarget import InvalidArgument, LogTarget, LogTargetKind


class TestForProject:
    def test_sets_kind_and_id(self) -> None:
        target = LogTarget.for_project("my-project")
        assert target.kind is LogTargetKind.PROJECT
        assert target.id == "my-project"

    def test_resource_name(self) -> None:
        target = LogTarget.for_project("my-project")
        assert target.resource_name == "projects/my-project"

    @pytest.mark.parametrize("project_id", [None, ""])
    def test_rejects_missing_project(self, project_id) -> None:
        with pytest.raises(InvalidArgument) as info:
            LogTarget.for_project(project_id)
        assert info.value.name == "project_id"


class TestForOrganization:
    def test_resource_name(self) -> None:
        target = LogTarget.for_organization("123456")
        assert target.kind is LogTargetKind.ORGANIZATION
        assert target.resource_name == "organizations/123456"

    @pytest.mark.parametrize("organization_id", [None, ""])
    def test_rejects_missing_organization(self, organization_id) -> None:
        with pytest.raises(InvalidArgument):
            LogTarget.for_organization(organization_id)


class TestFullLogName:
    def test_project_log(self) -> None:
        target = LogTarget.for_project("my-project")
        assert (
            target.full_log_name("stackdriver-error-reporting")
            == "projects/my-project/logs/stackdriver-error-reporting"
        )

    def test_quotes_slashes(self) -> None:
        target = LogTarget.for_organization("123")
        assert target.full_log_name("app/errors") == (
            "organizations/123/logs/app%2Ferrors"
        )

    def test_rejects_empty_log_name(self) -> None:
        with pytest.raises(InvalidArgument):
            LogTarget.for_project("my-project").full_log_name("")


def test_is_immutable() -> None:
    target = LogTarget.for_project("my-project")
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.id = "other"  # type: ignore[misc]


def test_equal_by_value() -> None:
    assert LogTarget.for_project("a") == LogTarget.for_project("a")
    assert LogTarget.for_project("a") != LogTarget.for_organization("a")
