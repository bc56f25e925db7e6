"""Unit tests for domain exceptions and their HTTP mapping."""

import falcon
import pytest

from societyhub.domain.exceptions import (
    DuplicateRoleError,
    InvalidPrivilegeError,
    InvalidRoleError,
    MembershipError,
    NotFound,
    PersistenceError,
    SocietyHubError,
    ValidationError,
)
from societyhub.interfaces.api.errors import ERROR_STATUS, parse_uuid, parse_uuid_list


@pytest.mark.parametrize(
    "exc_type",
    [
        ValidationError,
        MembershipError,
        InvalidRoleError,
        InvalidPrivilegeError,
        DuplicateRoleError,
        NotFound,
        PersistenceError,
    ],
)
def test_domain_errors_inherit_societyhub_error(exc_type) -> None:
    """Every domain error is a SocietyHubError and has an HTTP status."""
    assert issubclass(exc_type, SocietyHubError)
    assert exc_type in ERROR_STATUS


def test_raise_not_found_catchable_as_societyhub_error() -> None:
    """NotFound can be caught as SocietyHubError and formats its message."""
    with pytest.raises(SocietyHubError, match="Role not found: 123"):
        raise NotFound("Role", "123")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "Student is not a member of this society"
    with pytest.raises(MembershipError, match=msg):
        raise MembershipError(msg)


def test_error_status_mapping() -> None:
    assert ERROR_STATUS[ValidationError] == falcon.HTTP_400
    assert ERROR_STATUS[InvalidRoleError] == falcon.HTTP_400
    assert ERROR_STATUS[MembershipError] == falcon.HTTP_403
    assert ERROR_STATUS[NotFound] == falcon.HTTP_404
    assert ERROR_STATUS[DuplicateRoleError] == falcon.HTTP_409
    assert ERROR_STATUS[PersistenceError] == falcon.HTTP_503


def test_parse_uuid_rejects_garbage() -> None:
    with pytest.raises(ValidationError, match="Invalid role id"):
        parse_uuid("not-a-uuid", "role id")


def test_parse_uuid_list_requires_list() -> None:
    with pytest.raises(ValidationError, match="must be a list"):
        parse_uuid_list("abc", "role_ids")
