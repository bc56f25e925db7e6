"""Notification dispatcher port - role change fan-out."""

from typing import Protocol
from uuid import UUID

from societyhub.domain.value_objects import RoleChangeKind


class NotificationDispatcher(Protocol):
    """Port for notifying members that they gained or lost a role."""

    async def notify_role_change(
        self,
        role_id: UUID,
        society_id: UUID,
        member_ids: list[UUID],
        kind: RoleChangeKind,
    ) -> None: ...

    async def notify_student_roles(
        self,
        student_id: UUID,
        society_id: UUID,
        added_role_ids: list[UUID],
        removed_role_ids: list[UUID],
        remaining_count: int,
    ) -> None: ...
