"""Membership validator - precondition gate for role mutations."""

from uuid import UUID

from societyhub.application.ports import UnitOfWork
from societyhub.domain.exceptions import MembershipError


class MembershipValidator:
    """Confirms a student is an active member of a society."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_member(self, student_id: UUID, society_id: UUID) -> bool:
        """Pure read in its own unit of work."""
        async with self._uow_factory() as uow:
            return await uow.memberships.is_member(student_id, society_id)

    @staticmethod
    async def ensure_member(uow: UnitOfWork, student_id: UUID, society_id: UUID) -> None:
        """Raise MembershipError unless the student belongs to the society.

        Runs inside the caller's unit of work so the check shares its transaction.
        """
        if not await uow.memberships.is_member(student_id, society_id):
            raise MembershipError(
                f"Student {student_id} is not a member of society {society_id}"
            )
