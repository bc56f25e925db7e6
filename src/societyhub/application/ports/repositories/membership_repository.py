"""Membership repository port."""

from typing import Protocol
from uuid import UUID


class MembershipRepository(Protocol):
    """Port for reading society membership."""

    async def is_member(self, student_id: UUID, society_id: UUID) -> bool: ...

    async def find_members_of(self, society_id: UUID, candidate_ids: set[UUID]) -> set[UUID]: ...
