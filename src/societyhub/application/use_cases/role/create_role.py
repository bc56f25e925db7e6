"""Create role use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from societyhub.application.dto.role_dto import RoleCreateInput
from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.application.use_cases.role.common import (
    normalize_role_name,
    resolve_privileges,
    validate_member_ids,
    validate_min_semester,
    validate_privilege_keys,
)
from societyhub.domain.entities import Role
from societyhub.domain.exceptions import DuplicateRoleError
from societyhub.domain.value_objects import ActionNature, RoleChangeKind

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create role with privileges and assign it to confirmed members."""

    def __init__(self, unit_of_work_factory: type, effects: RoleChangeEffects) -> None:
        self._uow_factory = unit_of_work_factory
        self._effects = effects

    async def execute(self, actor_id: UUID, input_data: RoleCreateInput) -> Role:
        """Create role. Member ids without membership in the society are dropped."""
        name = normalize_role_name(input_data.name)
        keys = validate_privilege_keys(input_data.privilege_keys)
        min_semester = validate_min_semester(input_data.min_semester)
        member_ids = (
            validate_member_ids(input_data.member_ids)
            if input_data.member_ids is not None
            else set()
        )
        society_id = input_data.society_id

        async with self._uow_factory() as uow:
            privileges = await resolve_privileges(uow, keys)
            if await uow.roles.find_by_name(society_id, name):
                raise DuplicateRoleError(
                    f"A role named '{name}' already exists in this society"
                )

            now = datetime.now(UTC)
            role = Role(
                id=uuid4(),
                society_id=society_id,
                name=name,
                description=input_data.description,
                min_semester=min_semester,
                privilege_keys={p.key for p in privileges},
                created_at=now,
                updated_at=now,
            )
            await uow.roles.create(role)
            await uow.roles.set_privileges(role.id, [p.id for p in privileges])

            assigned: set[UUID] = set()
            if member_ids:
                assigned = await uow.memberships.find_members_of(society_id, member_ids)
                if assigned:
                    await uow.assignments.add_members(role.id, society_id, assigned)
                skipped = len(member_ids) - len(assigned)
                if skipped:
                    logger.info(
                        "Skipped %d non-member ids while creating role %s", skipped, role.id
                    )

        self._effects.notify(role.id, society_id, assigned, RoleChangeKind.ADDED)
        self._effects.record(
            actor_id,
            society_id,
            "CREATED_ROLE",
            f'Created role "{role.name}" and assigned it to {len(assigned)} member(s)',
            target_id=role.id,
            target_type="Role",
            nature=ActionNature.CONSTRUCTIVE,
        )
        return role
