"""Pool lifespan middleware - opens pool on startup, drains tasks and closes on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from societyhub.infrastructure.tasks.background import BackgroundTaskRunner

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Middleware that manages the connection pool and background task runner."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        task_runner: BackgroundTaskRunner,
        drain_timeout: float = 10.0,
    ) -> None:
        self._pool = pool
        self._task_runner = task_runner
        self._drain_timeout = drain_timeout

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        await self._pool.open()
        logger.info("Connection pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Let pending notifications finish, then close the pool."""
        await self._task_runner.drain(timeout=self._drain_timeout)
        await self._pool.close()
        logger.info("Connection pool closed")
