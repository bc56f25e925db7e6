"""Domain entities."""

from societyhub.domain.entities.activity import ActivityEntry
from societyhub.domain.entities.assignment import Assignment
from societyhub.domain.entities.notification import Notification
from societyhub.domain.entities.privilege import Privilege
from societyhub.domain.entities.role import Role
from societyhub.domain.entities.society import Society

__all__ = [
    "ActivityEntry",
    "Assignment",
    "Notification",
    "Privilege",
    "Role",
    "Society",
]
