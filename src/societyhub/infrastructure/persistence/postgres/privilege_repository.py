"""PostgreSQL privilege repository implementation."""

from psycopg import AsyncConnection

from societyhub.domain.entities import Privilege


class PostgresPrivilegeRepository:
    """Privilege catalog implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def resolve(self, keys: list[str]) -> list[Privilege]:
        """Privileges matching ``keys``; one row per known key."""
        if not keys:
            return []
        cur = await self._conn.execute(
            "SELECT id, key, title, description FROM privilege WHERE key = ANY(%s)",
            (list(keys),),
        )
        rows = await cur.fetchall()
        return [Privilege(id=r[0], key=r[1], title=r[2], description=r[3]) for r in rows]

    async def list_all(self) -> list[Privilege]:
        """List the whole catalog."""
        cur = await self._conn.execute(
            "SELECT id, key, title, description FROM privilege ORDER BY key"
        )
        rows = await cur.fetchall()
        return [Privilege(id=r[0], key=r[1], title=r[2], description=r[3]) for r in rows]
