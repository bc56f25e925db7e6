"""Direction of a role assignment change."""

from enum import StrEnum


class RoleChangeKind(StrEnum):
    """Whether members gained or lost a role."""

    ADDED = "added"
    REMOVED = "removed"
