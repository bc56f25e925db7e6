"""Role DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from societyhub.domain.entities import Role


@dataclass
class RoleCreateInput:
    """Input for creating a role."""

    society_id: UUID
    name: str
    privilege_keys: list[str]
    description: str | None = None
    min_semester: int | None = None
    member_ids: list[UUID] | None = None


@dataclass
class RoleUpdateInput:
    """Input for updating a role. ``None`` leaves the field unchanged."""

    role_id: UUID
    society_id: UUID
    name: str | None = None
    description: str | None = None
    min_semester: int | None = None
    privilege_keys: list[str] | None = None
    member_ids: list[UUID] | None = None


@dataclass
class RoleOutput:
    """Role with the ids of members holding it."""

    role: Role
    member_ids: set[UUID] = field(default_factory=set)


@dataclass
class ReconcileResult:
    """Outcome of reconciling a student's roles."""

    applied_roles: list[Role]
    message: str
    added: set[UUID] = field(default_factory=set)
    removed: set[UUID] = field(default_factory=set)
