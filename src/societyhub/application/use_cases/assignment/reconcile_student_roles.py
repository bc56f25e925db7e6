"""Reconcile student roles use case - core assignment diff and apply."""

import asyncio
import logging
import weakref
from uuid import UUID

from societyhub.application.dto.role_dto import ReconcileResult
from societyhub.application.notifications.role_change_content import (
    summarize_role_changes,
)
from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.application.use_cases.membership.validate_membership import (
    MembershipValidator,
)
from societyhub.domain.entities import Role
from societyhub.domain.exceptions import InvalidRoleError, ValidationError
from societyhub.domain.value_objects import ActionNature, RoleDiff

logger = logging.getLogger(__name__)


class SubjectLocks:
    """One asyncio.Lock per (student, society) pair, released when unused."""

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[tuple[UUID, UUID], asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def get(self, student_id: UUID, society_id: UUID) -> asyncio.Lock:
        key = (student_id, society_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock


def _by_name(roles: list[Role]) -> list[Role]:
    return sorted(roles, key=lambda r: r.name.casefold())


class ReconcileStudentRolesUseCase:
    """Move a student's roles in a society to a desired set.

    The baseline role is always kept. The add/remove diff is applied in one
    transaction; notifications and the activity entry are scheduled after
    commit and never affect the result.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_validator: MembershipValidator,
        effects: RoleChangeEffects,
        baseline_role_name: str = "Member",
        serialize: bool = True,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership = membership_validator
        self._effects = effects
        self._baseline_role_name = baseline_role_name
        self._locks = SubjectLocks() if serialize else None

    async def execute(
        self,
        actor_id: UUID,
        student_id: UUID,
        society_id: UUID,
        role_ids: list[UUID] | None,
    ) -> ReconcileResult:
        """Reconcile. ``role_ids=[]`` strips all but the baseline role;
        ``role_ids=None`` keeps the current roles.
        """
        if role_ids is not None:
            if not isinstance(role_ids, list) or not all(isinstance(r, UUID) for r in role_ids):
                raise ValidationError("Role ids must be a list of UUIDs")

        if self._locks is None:
            return await self._reconcile(actor_id, student_id, society_id, role_ids)
        async with self._locks.get(student_id, society_id):
            return await self._reconcile(actor_id, student_id, society_id, role_ids)

    async def _reconcile(
        self,
        actor_id: UUID,
        student_id: UUID,
        society_id: UUID,
        role_ids: list[UUID] | None,
    ) -> ReconcileResult:
        async with self._uow_factory() as uow:
            if self._locks is not None:
                await uow.assignments.lock_subject(student_id, society_id)
            await self._membership.ensure_member(uow, student_id, society_id)

            baseline, current = await asyncio.gather(
                uow.roles.get_baseline(society_id, self._baseline_role_name),
                uow.assignments.find_current_roles(student_id, society_id),
            )
            diff = RoleDiff.compute(current, role_ids, baseline.id if baseline else None)

            requested = diff.non_baseline_desired
            if requested:
                found = await uow.roles.list_by_ids(society_id, set(requested))
                if len(found) != len(requested):
                    missing = sorted(str(r) for r in requested - {r.id for r in found})
                    raise InvalidRoleError(
                        f"Roles do not belong to this society: {', '.join(missing)}"
                    )

            if not diff.requires_apply:
                logger.debug(
                    "No role changes for student %s in society %s", student_id, society_id
                )
                roles = await uow.roles.list_by_ids(society_id, set(diff.current))
                return ReconcileResult(
                    applied_roles=_by_name(roles),
                    message=summarize_role_changes(0, 0),
                )

            await uow.assignments.apply_diff(
                student_id, society_id, set(diff.to_add), set(diff.to_remove)
            )
            applied = await uow.roles.list_by_ids(society_id, set(diff.result))

        logger.info(
            "Reconciled roles for student %s in society %s: +%d -%d",
            student_id, society_id, len(diff.to_add), len(diff.to_remove),
        )
        self._schedule_effects(actor_id, student_id, society_id, diff)
        return ReconcileResult(
            applied_roles=_by_name(applied),
            message=summarize_role_changes(len(diff.to_add), len(diff.to_remove)),
            added=set(diff.to_add),
            removed=set(diff.to_remove),
        )

    def _schedule_effects(
        self, actor_id: UUID, student_id: UUID, society_id: UUID, diff: RoleDiff
    ) -> None:
        # The baseline role is never announced as a new role.
        self._effects.notify_student_roles(
            student_id,
            society_id,
            diff.to_add - {diff.baseline_id},
            diff.to_remove,
            remaining_count=len(diff.result - {diff.baseline_id}),
        )
        if diff.is_noop:
            return
        self._effects.record(
            actor_id,
            society_id,
            "CHANGED_ROLE",
            f"Changed roles of student {student_id}: "
            f"{summarize_role_changes(len(diff.to_add), len(diff.to_remove))}",
            target_id=student_id,
            target_type="Member",
            nature=ActionNature.ADMINISTRATIVE,
        )
