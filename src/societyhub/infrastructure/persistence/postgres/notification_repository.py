"""PostgreSQL notification repository implementation."""

from psycopg import AsyncConnection

from societyhub.domain.entities import Notification


class PostgresNotificationRepository:
    """Notification repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, notification: Notification) -> Notification:
        """Insert notification and one unread recipient row per student."""
        await self._conn.execute(
            "INSERT INTO notification (id, title, description, image, created_at) "
            "VALUES (%s, %s, %s, %s, %s)",
            (
                notification.id,
                notification.title,
                notification.description,
                notification.image,
                notification.created_at,
            ),
        )
        if notification.recipient_ids:
            async with self._conn.cursor() as cur:
                await cur.executemany(
                    "INSERT INTO notification_recipient (notification_id, student_id, "
                    "web_redirect_url, mobile_redirect_url, is_read) "
                    "VALUES (%s, %s, %s, %s, false)",
                    [
                        (
                            notification.id,
                            student_id,
                            notification.web_redirect_url,
                            notification.mobile_redirect_url,
                        )
                        for student_id in notification.recipient_ids
                    ],
                )
        return notification
