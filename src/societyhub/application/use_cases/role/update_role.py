"""Update role use case."""

from datetime import UTC, datetime
from uuid import UUID

from societyhub.application.dto.role_dto import RoleUpdateInput
from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.application.use_cases.role.common import (
    normalize_role_name,
    resolve_privileges,
    validate_member_ids,
    validate_min_semester,
    validate_privilege_keys,
)
from societyhub.domain.entities import Role
from societyhub.domain.exceptions import DuplicateRoleError, NotFound, ValidationError
from societyhub.domain.value_objects import ActionNature, RoleChangeKind


class UpdateRoleUseCase:
    """Update role fields, replace its privilege set and member list."""

    def __init__(
        self,
        unit_of_work_factory: type,
        effects: RoleChangeEffects,
        baseline_role_name: str = "Member",
        notify_removed_members: bool = False,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._effects = effects
        self._baseline_role_name = baseline_role_name
        # Removed members are not notified unless enabled.
        self._notify_removed_members = notify_removed_members

    async def execute(self, actor_id: UUID, input_data: RoleUpdateInput) -> Role:
        """Update role. ``member_ids`` replaces the full assignment list."""
        name = (
            normalize_role_name(input_data.name) if input_data.name is not None else None
        )
        keys = (
            validate_privilege_keys(input_data.privilege_keys)
            if input_data.privilege_keys is not None
            else None
        )
        min_semester = validate_min_semester(input_data.min_semester)
        member_ids = (
            validate_member_ids(input_data.member_ids)
            if input_data.member_ids is not None
            else None
        )
        society_id = input_data.society_id

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(input_data.role_id)
            if not role or role.society_id != society_id:
                raise NotFound("Role", str(input_data.role_id))

            is_baseline = role.is_named(self._baseline_role_name)
            if name is not None and not role.is_named(name):
                if is_baseline:
                    raise ValidationError("The baseline role cannot be renamed")
                duplicate = await uow.roles.find_by_name(society_id, name, exclude_id=role.id)
                if duplicate:
                    raise DuplicateRoleError(
                        f"Role with name '{name}' already exists in this society"
                    )
            if member_ids is not None and is_baseline:
                raise ValidationError("Baseline role members follow society membership")

            privileges = await resolve_privileges(uow, keys) if keys is not None else None

            added: set[UUID] = set()
            removed: set[UUID] = set()
            if member_ids is not None:
                previous = await uow.assignments.list_member_ids(role.id)
                valid = (
                    await uow.memberships.find_members_of(society_id, member_ids)
                    if member_ids
                    else set()
                )
                added = valid - previous
                removed = previous - valid

            if name is not None:
                role.name = name
            if input_data.description is not None:
                role.description = input_data.description
            if min_semester is not None:
                role.min_semester = min_semester
            if privileges is not None:
                await uow.roles.set_privileges(role.id, [p.id for p in privileges])
                role.privilege_keys = {p.key for p in privileges}
            role.updated_at = datetime.now(UTC)
            await uow.roles.update(role)

            if removed:
                await uow.assignments.remove_members(role.id, removed)
            if added:
                await uow.assignments.add_members(role.id, society_id, added)

        self._effects.notify(role.id, society_id, added, RoleChangeKind.ADDED)
        if self._notify_removed_members:
            self._effects.notify(role.id, society_id, removed, RoleChangeKind.REMOVED)
        self._effects.record(
            actor_id,
            society_id,
            "UPDATED_ROLE",
            f'Updated role "{role.name}" ({len(added)} added, {len(removed)} removed)',
            target_id=role.id,
            target_type="Role",
            nature=ActionNature.ADMINISTRATIVE,
        )
        return role
