"""Role change notification dispatcher - stores in-app notifications."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from societyhub.application.notifications.role_change_content import (
    NotificationContent,
    build_role_change_content,
)
from societyhub.application.ports import UnitOfWork
from societyhub.domain.entities import Notification, Society
from societyhub.domain.exceptions import NotFound
from societyhub.domain.value_objects import RoleChangeKind

logger = logging.getLogger(__name__)


class RoleNotificationDispatcher:
    """Writes in-app role change notifications with a recipient per student.

    Delivery to email or push channels happens elsewhere; this adapter only
    persists the in-app notification.
    """

    def __init__(self, unit_of_work_factory: type, baseline_role_name: str = "Member") -> None:
        self._uow_factory = unit_of_work_factory
        self._baseline_role_name = baseline_role_name

    async def notify_role_change(
        self,
        role_id: UUID,
        society_id: UUID,
        member_ids: list[UUID],
        kind: RoleChangeKind,
    ) -> None:
        """One notification for every member gaining or losing one role.

        Raises when role or society is gone.
        """
        if not member_ids:
            return
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))
            society = await self._get_society(uow, society_id)

            added = [role.name] if kind == RoleChangeKind.ADDED else []
            removed = [role.name] if kind == RoleChangeKind.REMOVED else []
            content = build_role_change_content(
                society.name, added, removed, baseline_name=self._baseline_role_name
            )
            if content is None:
                return
            await self._store(uow, society, content, member_ids)

        logger.info(
            "Stored %s notification for role %s in society %s (%d recipients)",
            kind, role.name, society.name, len(member_ids),
        )

    async def notify_student_roles(
        self,
        student_id: UUID,
        society_id: UUID,
        added_role_ids: list[UUID],
        removed_role_ids: list[UUID],
        remaining_count: int,
    ) -> None:
        """One combined notification for a student's reconciled roles.

        ``remaining_count`` is the number of non-baseline roles the student
        holds afterwards. Roles deleted in the meantime are left out.
        """
        if not added_role_ids and not removed_role_ids:
            return
        async with self._uow_factory() as uow:
            society = await self._get_society(uow, society_id)
            roles = await uow.roles.list_by_ids(
                society_id, set(added_role_ids) | set(removed_role_ids)
            )
            names = {r.id: r.name for r in roles}
            added = sorted(names[r] for r in added_role_ids if r in names)
            removed = sorted(names[r] for r in removed_role_ids if r in names)
            if len(names) < len(set(added_role_ids) | set(removed_role_ids)):
                logger.warning(
                    "Some roles changed for student %s no longer exist", student_id
                )

            content = build_role_change_content(
                society.name,
                added,
                removed,
                remaining_count=remaining_count,
                baseline_name=self._baseline_role_name,
            )
            if content is None:
                return
            await self._store(uow, society, content, [student_id])

        logger.info(
            "Stored role change notification for student %s in society %s (+%d -%d)",
            student_id, society.name, len(added), len(removed),
        )

    @staticmethod
    async def _get_society(uow: UnitOfWork, society_id: UUID) -> Society:
        society = await uow.societies.get_by_id(society_id)
        if not society:
            raise NotFound("Society", str(society_id))
        return society

    @staticmethod
    async def _store(
        uow: UnitOfWork,
        society: Society,
        content: NotificationContent,
        recipient_ids: list[UUID],
    ) -> None:
        await uow.notifications.create(
            Notification(
                id=uuid4(),
                title=content.title,
                description=content.description,
                created_at=datetime.now(UTC),
                image=society.logo,
                recipient_ids=list(recipient_ids),
                web_redirect_url=f"/society/{society.id}",
                mobile_redirect_url=f"/(student-tabs)/society/{society.id}",
            )
        )
