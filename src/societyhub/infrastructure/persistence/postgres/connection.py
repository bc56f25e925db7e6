"""PostgreSQL async connection pool."""

import logging

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


def _log_reconnect_failed(pool: AsyncConnectionPool) -> None:
    logger.error("Pool %s could not reconnect to the database", pool.name)


def create_pool(
    conninfo: str,
    min_size: int = 2,
    max_size: int = 10,
    timeout: float = 30.0,
) -> AsyncConnectionPool:
    """Create the ``societyhub`` pool, closed.

    Opened by PoolLifespanMiddleware on ASGI startup. Connections are checked
    before being handed out so a restarted server does not fail the first
    transaction after it.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        name="societyhub",
        check=AsyncConnectionPool.check_connection,
        reconnect_failed=_log_reconnect_failed,
        open=False,
    )
