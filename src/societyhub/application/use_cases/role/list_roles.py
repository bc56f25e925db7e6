"""List society roles use case."""

from uuid import UUID

from societyhub.application.dto.role_dto import RoleOutput


class ListSocietyRolesUseCase:
    """List roles of a society with their privileges and members."""

    def __init__(self, unit_of_work_factory: type, baseline_role_name: str = "Member") -> None:
        self._uow_factory = unit_of_work_factory
        self._baseline_role_name = baseline_role_name

    async def execute(self, society_id: UUID, include_baseline: bool = False) -> list[RoleOutput]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_by_society(society_id)
            items = []
            for role in roles:
                if not include_baseline and role.is_named(self._baseline_role_name):
                    continue
                member_ids = await uow.assignments.list_member_ids(role.id)
                items.append(RoleOutput(role=role, member_ids=member_ids))
        return items
