"""Input checks shared by role use cases."""

from uuid import UUID

from societyhub.application.ports import UnitOfWork
from societyhub.domain.entities import Privilege
from societyhub.domain.exceptions import InvalidPrivilegeError, ValidationError

MAX_ROLE_NAME_LENGTH = 100


def normalize_role_name(name: object) -> str:
    """Strip and check the role name."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Role name is required")
    name = name.strip()
    if len(name) > MAX_ROLE_NAME_LENGTH:
        raise ValidationError(f"Role name must be at most {MAX_ROLE_NAME_LENGTH} characters")
    return name


def validate_min_semester(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError("Minimum semester must be a positive integer")
    return value


def validate_privilege_keys(keys: object) -> list[str]:
    """Return unique keys in input order."""
    if not isinstance(keys, (list, tuple)):
        raise ValidationError("Privileges must be a list of keys")
    if not all(isinstance(k, str) for k in keys):
        raise ValidationError("Privilege keys must be strings")
    return list(dict.fromkeys(keys))


def validate_member_ids(member_ids: object) -> set[UUID]:
    if not isinstance(member_ids, (list, tuple, set, frozenset)):
        raise ValidationError("Members must be a list of student ids")
    if not all(isinstance(m, UUID) for m in member_ids):
        raise ValidationError("Member ids must be UUIDs")
    return set(member_ids)


async def resolve_privileges(uow: UnitOfWork, keys: list[str]) -> list[Privilege]:
    """Resolve keys against the catalog; any unknown key fails the whole call."""
    if not keys:
        return []
    privileges = await uow.privileges.resolve(keys)
    if len(privileges) != len(keys):
        unknown = sorted(set(keys) - {p.key for p in privileges})
        raise InvalidPrivilegeError(
            f"One or more privilege keys are invalid: {', '.join(unknown)}"
        )
    return privileges
