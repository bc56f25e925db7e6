"""PostgreSQL society repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from societyhub.domain.entities import Society


class PostgresSocietyRepository:
    """Society repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, society_id: UUID) -> Society | None:
        """Get society by id."""
        cur = await self._conn.execute(
            "SELECT id, name, logo FROM society WHERE id = %s",
            (society_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Society(id=r[0], name=r[1], logo=r[2])
