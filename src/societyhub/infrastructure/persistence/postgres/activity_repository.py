"""PostgreSQL activity log repository implementation."""

from psycopg import AsyncConnection

from societyhub.domain.entities import ActivityEntry


class PostgresActivityRepository:
    """Activity log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: ActivityEntry) -> ActivityEntry:
        """Append activity entry."""
        await self._conn.execute(
            "INSERT INTO activity_log (id, actor_id, society_id, action, description, nature, "
            "target_id, target_type, created_at) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.actor_id,
                entry.society_id,
                entry.action,
                entry.description,
                str(entry.nature),
                entry.target_id,
                entry.target_type,
                entry.created_at,
            ),
        )
        return entry
