"""Role repository port."""

from typing import Protocol
from uuid import UUID

from societyhub.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def list_by_society(self, society_id: UUID) -> list[Role]: ...

    async def list_by_ids(self, society_id: UUID, role_ids: set[UUID]) -> list[Role]: ...

    async def find_by_name(
        self, society_id: UUID, name: str, exclude_id: UUID | None = None
    ) -> Role | None: ...

    async def get_baseline(self, society_id: UUID, baseline_name: str) -> Role | None: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def set_privileges(self, role_id: UUID, privilege_ids: list[UUID]) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...
