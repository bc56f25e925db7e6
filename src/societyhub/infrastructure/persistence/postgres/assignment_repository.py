"""PostgreSQL assignment repository implementation."""

from datetime import UTC, datetime
from uuid import UUID

from psycopg import AsyncConnection

from societyhub.domain.entities import Assignment


class PostgresAssignmentRepository:
    """Assignment repository over the student_society_role table."""

    def __init__(self, conn: AsyncConnection, batch_size: int = 25) -> None:
        self._conn = conn
        self._batch_size = batch_size

    async def find_current_roles(self, student_id: UUID, society_id: UUID) -> set[UUID]:
        """Role ids the student holds in the society."""
        cur = await self._conn.execute(
            "SELECT role_id FROM student_society_role WHERE student_id = %s AND society_id = %s",
            (student_id, society_id),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def _insert(self, assignments: list[Assignment]) -> int:
        inserted = 0
        async with self._conn.cursor() as cur:
            for start in range(0, len(assignments), self._batch_size):
                batch = assignments[start : start + self._batch_size]
                await cur.executemany(
                    "INSERT INTO student_society_role (student_id, society_id, role_id, assigned_at) "
                    "VALUES (%s, %s, %s, %s) ON CONFLICT DO NOTHING",
                    [(a.student_id, a.society_id, a.role_id, a.assigned_at) for a in batch],
                )
                inserted += max(cur.rowcount, 0)
        return inserted

    async def apply_diff(
        self,
        student_id: UUID,
        society_id: UUID,
        to_add: set[UUID],
        to_remove: set[UUID],
    ) -> None:
        """Delete ``to_remove`` and insert ``to_add`` on the current transaction."""
        if to_remove:
            await self._conn.execute(
                "DELETE FROM student_society_role "
                "WHERE student_id = %s AND society_id = %s AND role_id = ANY(%s)",
                (student_id, society_id, list(to_remove)),
            )
        if to_add:
            now = datetime.now(UTC)
            await self._insert(
                [Assignment(student_id, society_id, role_id, now) for role_id in sorted(to_add)]
            )

    async def list_member_ids(self, role_id: UUID) -> set[UUID]:
        """Students holding the role."""
        cur = await self._conn.execute(
            "SELECT student_id FROM student_society_role WHERE role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def add_members(self, role_id: UUID, society_id: UUID, student_ids: set[UUID]) -> int:
        """Assign role to students, skipping existing assignments."""
        now = datetime.now(UTC)
        return await self._insert(
            [Assignment(student_id, society_id, role_id, now) for student_id in sorted(student_ids)]
        )

    async def remove_members(self, role_id: UUID, student_ids: set[UUID]) -> int:
        """Remove role from students."""
        if not student_ids:
            return 0
        cur = await self._conn.execute(
            "DELETE FROM student_society_role WHERE role_id = %s AND student_id = ANY(%s)",
            (role_id, list(student_ids)),
        )
        return cur.rowcount

    async def delete_by_role(self, role_id: UUID) -> int:
        """Delete every assignment of the role."""
        cur = await self._conn.execute(
            "DELETE FROM student_society_role WHERE role_id = %s",
            (role_id,),
        )
        return cur.rowcount

    async def lock_subject(self, student_id: UUID, society_id: UUID) -> None:
        """Transaction-scoped advisory lock on the (student, society) pair."""
        await self._conn.execute(
            "SELECT pg_advisory_xact_lock(hashtextextended(%s, 0))",
            (f"student_society_role:{student_id}:{society_id}",),
        )
