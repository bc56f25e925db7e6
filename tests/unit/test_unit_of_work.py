"""Unit tests for the PostgreSQL unit of work factory."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock
from uuid import uuid4

import psycopg
import pytest

from societyhub.domain.entities import Role
from societyhub.domain.exceptions import DuplicateRoleError, PersistenceError, ValidationError
from societyhub.infrastructure.persistence.postgres.unit_of_work import create_uow_factory


class _StubPool:
    def __init__(self) -> None:
        self.conn = AsyncMock()

    @asynccontextmanager
    async def connection(self):
        yield self.conn


@pytest.mark.asyncio
async def test_uow_commits_on_success() -> None:
    pool = _StubPool()
    factory = create_uow_factory(pool)

    async with factory() as uow:
        assert uow.assignments is not None

    pool.conn.commit.assert_awaited_once()
    pool.conn.rollback.assert_not_called()


@pytest.mark.asyncio
async def test_uow_wraps_database_errors() -> None:
    """psycopg errors roll back and surface as PersistenceError."""
    pool = _StubPool()
    factory = create_uow_factory(pool)

    with pytest.raises(PersistenceError):
        async with factory():
            raise psycopg.OperationalError("server closed the connection unexpectedly")

    pool.conn.rollback.assert_awaited()
    pool.conn.commit.assert_not_called()


@pytest.mark.asyncio
async def test_uow_propagates_domain_errors() -> None:
    pool = _StubPool()
    factory = create_uow_factory(pool)

    with pytest.raises(ValidationError):
        async with factory():
            raise ValidationError("bad input")

    pool.conn.rollback.assert_awaited()


@pytest.mark.asyncio
async def test_unique_name_violation_surfaces_as_duplicate_role() -> None:
    """A name clash caught by the unique index is a conflict, not an outage."""
    pool = _StubPool()
    pool.conn.execute.side_effect = psycopg.errors.UniqueViolation(
        "duplicate key value violates unique constraint"
    )
    factory = create_uow_factory(pool)
    role = Role(id=uuid4(), society_id=uuid4(), name="Treasurer")

    with pytest.raises(DuplicateRoleError, match="Treasurer"):
        async with factory() as uow:
            await uow.roles.create(role)

    pool.conn.rollback.assert_awaited()
    pool.conn.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unique_name_violation_on_rename_surfaces_as_duplicate_role() -> None:
    pool = _StubPool()
    pool.conn.execute.side_effect = psycopg.errors.UniqueViolation(
        "duplicate key value violates unique constraint"
    )
    factory = create_uow_factory(pool)

    with pytest.raises(DuplicateRoleError):
        async with factory() as uow:
            await uow.roles.update(Role(id=uuid4(), society_id=uuid4(), name="President"))

    pool.conn.rollback.assert_awaited()
