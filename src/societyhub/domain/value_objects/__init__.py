"""Domain value objects."""

from societyhub.domain.value_objects.action_nature import ActionNature
from societyhub.domain.value_objects.privilege_key import PrivilegeKey
from societyhub.domain.value_objects.role_change_kind import RoleChangeKind
from societyhub.domain.value_objects.role_diff import RoleDiff

__all__ = [
    "ActionNature",
    "PrivilegeKey",
    "RoleChangeKind",
    "RoleDiff",
]
