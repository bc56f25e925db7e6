"""Mapping of domain exceptions to HTTP responses."""

from uuid import UUID

import falcon
import falcon.asgi

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

ERROR_STATUS: dict[type[SocietyHubError], str] = {
    ValidationError: falcon.HTTP_400,
    InvalidRoleError: falcon.HTTP_400,
    InvalidPrivilegeError: falcon.HTTP_400,
    MembershipError: falcon.HTTP_403,
    NotFound: falcon.HTTP_404,
    DuplicateRoleError: falcon.HTTP_409,
    PersistenceError: falcon.HTTP_503,
}


def write_error(resp: falcon.asgi.Response, exc: SocietyHubError) -> None:
    """Set status and body for a domain error."""
    resp.status = ERROR_STATUS.get(type(exc), falcon.HTTP_500)
    resp.media = {"error": str(exc), "type": type(exc).__name__}


def parse_uuid(value: object, field: str) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {field}") from None


def parse_uuid_list(value: object, field: str) -> list[UUID]:
    if not isinstance(value, list):
        raise ValidationError(f"{field} must be a list")
    return [parse_uuid(v, field) for v in value]
