"""Repository ports."""

from societyhub.application.ports.repositories.activity_repository import (
    ActivityRepository,
)
from societyhub.application.ports.repositories.assignment_repository import (
    AssignmentRepository,
)
from societyhub.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from societyhub.application.ports.repositories.notification_repository import (
    NotificationRepository,
)
from societyhub.application.ports.repositories.privilege_repository import (
    PrivilegeRepository,
)
from societyhub.application.ports.repositories.role_repository import RoleRepository
from societyhub.application.ports.repositories.society_repository import (
    SocietyRepository,
)

__all__ = [
    "ActivityRepository",
    "AssignmentRepository",
    "MembershipRepository",
    "NotificationRepository",
    "PrivilegeRepository",
    "RoleRepository",
    "SocietyRepository",
]
