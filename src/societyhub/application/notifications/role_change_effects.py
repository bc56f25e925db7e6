"""Detached side effects of role changes."""

import logging
from collections.abc import Iterable
from uuid import UUID

from societyhub.application.ports import (
    ActivityRecorder,
    NotificationDispatcher,
    TaskScheduler,
)
from societyhub.domain.value_objects import ActionNature, RoleChangeKind

logger = logging.getLogger(__name__)


class RoleChangeEffects:
    """Schedules notifications and activity entries after a transaction commits.

    Nothing here is awaited by the caller; failures surface only in logs.
    """

    def __init__(
        self,
        scheduler: TaskScheduler,
        notification_dispatcher: NotificationDispatcher,
        activity_recorder: ActivityRecorder,
    ) -> None:
        self._scheduler = scheduler
        self._dispatcher = notification_dispatcher
        self._recorder = activity_recorder

    def notify(
        self,
        role_id: UUID,
        society_id: UUID,
        member_ids: Iterable[UUID],
        kind: RoleChangeKind,
    ) -> None:
        """Schedule a role change notification for ``member_ids``."""
        members = sorted(member_ids)
        if not members:
            return
        logger.debug(
            "Scheduling %s notification for role %s (%d members)",
            kind, role_id, len(members),
        )
        self._scheduler.spawn(
            self._dispatcher.notify_role_change(role_id, society_id, members, kind),
            name=f"notify-role-{kind}-{role_id}",
        )

    def notify_student_roles(
        self,
        student_id: UUID,
        society_id: UUID,
        added_role_ids: Iterable[UUID],
        removed_role_ids: Iterable[UUID],
        remaining_count: int,
    ) -> None:
        """Schedule one combined notification for a student's role changes."""
        added = sorted(added_role_ids)
        removed = sorted(removed_role_ids)
        if not added and not removed:
            return
        self._scheduler.spawn(
            self._dispatcher.notify_student_roles(
                student_id, society_id, added, removed, remaining_count
            ),
            name=f"notify-student-roles-{student_id}",
        )

    def record(
        self,
        actor_id: UUID,
        society_id: UUID,
        action: str,
        description: str,
        *,
        target_id: UUID | None = None,
        target_type: str | None = None,
        nature: ActionNature = ActionNature.ADMINISTRATIVE,
    ) -> None:
        """Schedule an activity log entry."""
        self._scheduler.spawn(
            self._recorder.record(
                actor_id,
                society_id,
                action,
                description,
                target_id,
                target_type,
                nature,
            ),
            name=f"activity-{action.lower()}-{society_id}",
        )
