"""Assignment repository port."""

from typing import Protocol
from uuid import UUID


class AssignmentRepository(Protocol):
    """Port for student-role-society assignments."""

    async def find_current_roles(self, student_id: UUID, society_id: UUID) -> set[UUID]: ...

    async def apply_diff(
        self,
        student_id: UUID,
        society_id: UUID,
        to_add: set[UUID],
        to_remove: set[UUID],
    ) -> None: ...

    async def list_member_ids(self, role_id: UUID) -> set[UUID]: ...

    async def add_members(self, role_id: UUID, society_id: UUID, student_ids: set[UUID]) -> int: ...

    async def remove_members(self, role_id: UUID, student_ids: set[UUID]) -> int: ...

    async def delete_by_role(self, role_id: UUID) -> int: ...

    async def lock_subject(self, student_id: UUID, society_id: UUID) -> None: ...
