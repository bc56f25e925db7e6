"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from societyhub.domain.exceptions import PersistenceError
from societyhub.infrastructure.persistence.postgres.activity_repository import (
    PostgresActivityRepository,
)
from societyhub.infrastructure.persistence.postgres.assignment_repository import (
    PostgresAssignmentRepository,
)
from societyhub.infrastructure.persistence.postgres.membership_repository import (
    PostgresMembershipRepository,
)
from societyhub.infrastructure.persistence.postgres.notification_repository import (
    PostgresNotificationRepository,
)
from societyhub.infrastructure.persistence.postgres.privilege_repository import (
    PostgresPrivilegeRepository,
)
from societyhub.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from societyhub.infrastructure.persistence.postgres.society_repository import (
    PostgresSocietyRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool, batch_size: int = 25) -> None:
        self._pool = pool
        self._batch_size = batch_size
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(self._conn)
        self._privileges = PostgresPrivilegeRepository(self._conn)
        self._assignments = PostgresAssignmentRepository(self._conn, self._batch_size)
        self._memberships = PostgresMembershipRepository(self._conn)
        self._societies = PostgresSocietyRepository(self._conn)
        self._activities = PostgresActivityRepository(self._conn)
        self._notifications = PostgresNotificationRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def privileges(self) -> PostgresPrivilegeRepository:
        return self._privileges

    @property
    def assignments(self) -> PostgresAssignmentRepository:
        return self._assignments

    @property
    def memberships(self) -> PostgresMembershipRepository:
        return self._memberships

    @property
    def societies(self) -> PostgresSocietyRepository:
        return self._societies

    @property
    def activities(self) -> PostgresActivityRepository:
        return self._activities

    @property
    def notifications(self) -> PostgresNotificationRepository:
        return self._notifications

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool, batch_size: int = 25) -> object:
    """Create UnitOfWork factory (async context manager).

    Database errors inside the block roll back the transaction and surface
    as PersistenceError.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool, batch_size)
        try:
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as exc:
            logger.exception("Transaction rolled back")
            raise PersistenceError("Could not persist changes; nothing was applied") from exc

    return factory
