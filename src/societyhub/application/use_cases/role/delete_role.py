"""Delete role use case."""

from uuid import UUID

from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.domain.exceptions import NotFound, ValidationError
from societyhub.domain.value_objects import ActionNature


class DeleteRoleUseCase:
    """Delete role: assignments, then privilege links, then the role itself."""

    def __init__(
        self,
        unit_of_work_factory: type,
        effects: RoleChangeEffects,
        baseline_role_name: str = "Member",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._effects = effects
        self._baseline_role_name = baseline_role_name

    async def execute(self, actor_id: UUID, role_id: UUID, society_id: UUID) -> None:
        """Delete role in one transaction. No partial deletion is observable."""
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role or role.society_id != society_id:
                raise NotFound("Role", str(role_id))
            if role.is_named(self._baseline_role_name):
                raise ValidationError("The baseline role cannot be deleted")

            removed = await uow.assignments.delete_by_role(role_id)
            await uow.roles.set_privileges(role_id, [])
            await uow.roles.delete(role_id)

        self._effects.record(
            actor_id,
            society_id,
            "DELETED_ROLE",
            f'Deleted role "{role.name}" held by {removed} member(s)',
            target_id=role_id,
            target_type="Role",
            nature=ActionNature.DESTRUCTIVE,
        )
