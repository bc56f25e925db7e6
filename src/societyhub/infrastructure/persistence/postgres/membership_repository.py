"""PostgreSQL membership repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection


class PostgresMembershipRepository:
    """Reads the student_society membership table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def is_member(self, student_id: UUID, society_id: UUID) -> bool:
        """Check membership."""
        cur = await self._conn.execute(
            "SELECT 1 FROM student_society WHERE student_id = %s AND society_id = %s",
            (student_id, society_id),
        )
        return await cur.fetchone() is not None

    async def find_members_of(self, society_id: UUID, candidate_ids: set[UUID]) -> set[UUID]:
        """Subset of ``candidate_ids`` that are members of the society."""
        if not candidate_ids:
            return set()
        cur = await self._conn.execute(
            "SELECT student_id FROM student_society WHERE society_id = %s AND student_id = ANY(%s)",
            (society_id, list(candidate_ids)),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}
