"""Provision default society roles use case."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.application.use_cases.role.common import resolve_privileges
from societyhub.domain.entities import Role
from societyhub.domain.exceptions import NotFound
from societyhub.domain.value_objects import ActionNature, PrivilegeKey


@dataclass(frozen=True)
class RoleTemplate:
    """Default role definition."""

    name: str
    description: str
    privileges: tuple[PrivilegeKey, ...] = ()


OFFICER_ROLES: tuple[RoleTemplate, ...] = (
    RoleTemplate(
        name="President",
        description=(
            "Official representative of the society. Oversees all functional "
            "offices and co-approves budgets."
        ),
        privileges=(
            PrivilegeKey.EVENT_MANAGEMENT,
            PrivilegeKey.MEMBER_MANAGEMENT,
            PrivilegeKey.ANNOUNCEMENT_MANAGEMENT,
            PrivilegeKey.CONTENT_MANAGEMENT,
            PrivilegeKey.EVENT_TICKET_HANDLING,
            PrivilegeKey.SOCIETY_SETTINGS_MANAGEMENT,
            PrivilegeKey.TASK_MANAGEMENT,
            PrivilegeKey.MEETING_MANAGEMENT,
        ),
    ),
    RoleTemplate(
        name="Vice President",
        description="Assists the President in overseeing society operations.",
        privileges=(
            PrivilegeKey.EVENT_MANAGEMENT,
            PrivilegeKey.MEMBER_MANAGEMENT,
            PrivilegeKey.ANNOUNCEMENT_MANAGEMENT,
            PrivilegeKey.CONTENT_MANAGEMENT,
            PrivilegeKey.EVENT_TICKET_HANDLING,
            PrivilegeKey.TASK_MANAGEMENT,
            PrivilegeKey.MEETING_MANAGEMENT,
        ),
    ),
    RoleTemplate(
        name="General Secretary",
        description="Coordinates functional offices and tracks ongoing tasks.",
        privileges=(
            PrivilegeKey.EVENT_MANAGEMENT,
            PrivilegeKey.ANNOUNCEMENT_MANAGEMENT,
            PrivilegeKey.CONTENT_MANAGEMENT,
            PrivilegeKey.EVENT_TICKET_HANDLING,
            PrivilegeKey.TASK_MANAGEMENT,
            PrivilegeKey.MEETING_MANAGEMENT,
        ),
    ),
    RoleTemplate(
        name="Treasurer",
        description="Manages society finances, budgets and payment records.",
        privileges=(PrivilegeKey.PAYMENT_FINANCE_MANAGEMENT,),
    ),
)


class ProvisionSocietyRolesUseCase:
    """Create the baseline role and default officer roles for a society.

    Roles that already exist (by name, case-insensitive) are left untouched,
    so running it twice creates nothing the second time.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        effects: RoleChangeEffects,
        baseline_role_name: str = "Member",
        templates: tuple[RoleTemplate, ...] = OFFICER_ROLES,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._effects = effects
        self._templates = (
            RoleTemplate(
                name=baseline_role_name,
                description="A member of the society who participates in activities and events.",
            ),
            *templates,
        )

    async def execute(self, actor_id: UUID, society_id: UUID) -> list[Role]:
        """Return the roles created by this call."""
        created: list[Role] = []
        async with self._uow_factory() as uow:
            if not await uow.societies.get_by_id(society_id):
                raise NotFound("Society", str(society_id))

            for template in self._templates:
                if await uow.roles.find_by_name(society_id, template.name):
                    continue
                privileges = await resolve_privileges(
                    uow, [str(key) for key in template.privileges]
                )
                now = datetime.now(UTC)
                role = Role(
                    id=uuid4(),
                    society_id=society_id,
                    name=template.name,
                    description=template.description,
                    privilege_keys={p.key for p in privileges},
                    created_at=now,
                    updated_at=now,
                )
                await uow.roles.create(role)
                await uow.roles.set_privileges(role.id, [p.id for p in privileges])
                created.append(role)

        if created:
            self._effects.record(
                actor_id,
                society_id,
                "CREATED_ROLE",
                f"Provisioned default roles: {', '.join(r.name for r in created)}",
                target_type="Role",
                nature=ActionNature.ADMINISTRATIVE,
            )
        return created
