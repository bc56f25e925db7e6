"""Pytest fixtures for SocietyHub tests."""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.domain.entities import (
    ActivityEntry,
    Notification,
    Privilege,
    Role,
    Society,
)
from societyhub.domain.exceptions import PersistenceError
from societyhub.domain.value_objects import PrivilegeKey
from societyhub.infrastructure.tasks.background import BackgroundTaskRunner


# --- Fake database ---


class FakeDatabase:
    """Shared in-memory state behind the fake repositories."""

    def __init__(self) -> None:
        self.societies: dict[UUID, Society] = {}
        self.roles: dict[UUID, Role] = {}
        self.privileges: dict[str, Privilege] = {
            key.value: Privilege(id=uuid4(), key=key.value, title=key.value.replace("_", " ").title())
            for key in PrivilegeKey
        }
        self.role_privileges: dict[UUID, set[UUID]] = {}
        self.memberships: set[tuple[UUID, UUID]] = set()  # (student_id, society_id)
        self.assignments: set[tuple[UUID, UUID, UUID]] = set()  # (student, society, role)
        self.activities: list[ActivityEntry] = []
        self.notifications: list[Notification] = []

    def snapshot(self) -> dict:
        return copy.deepcopy(self.__dict__)

    def restore(self, state: dict) -> None:
        self.__dict__.update(state)


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, role_id: UUID) -> Role | None:
        role = self._db.roles.get(role_id)
        return copy.deepcopy(role) if role else None

    async def list_by_society(self, society_id: UUID) -> list[Role]:
        return [copy.deepcopy(r) for r in self._db.roles.values() if r.society_id == society_id]

    async def list_by_ids(self, society_id: UUID, role_ids: set[UUID]) -> list[Role]:
        return [
            copy.deepcopy(r)
            for r in self._db.roles.values()
            if r.society_id == society_id and r.id in role_ids
        ]

    async def find_by_name(
        self, society_id: UUID, name: str, exclude_id: UUID | None = None
    ) -> Role | None:
        for r in self._db.roles.values():
            if r.society_id == society_id and r.is_named(name) and r.id != exclude_id:
                return copy.deepcopy(r)
        return None

    async def get_baseline(self, society_id: UUID, baseline_name: str) -> Role | None:
        return await self.find_by_name(society_id, baseline_name)

    async def create(self, role: Role) -> Role:
        self._db.roles[role.id] = copy.deepcopy(role)
        self._db.role_privileges.setdefault(role.id, set())
        return role

    async def update(self, role: Role) -> None:
        stored = copy.deepcopy(role)
        stored.privilege_keys = set(self._db.roles[role.id].privilege_keys)
        self._db.roles[role.id] = stored

    async def set_privileges(self, role_id: UUID, privilege_ids: list[UUID]) -> None:
        self._db.role_privileges[role_id] = set(privilege_ids)
        by_id = {p.id: p.key for p in self._db.privileges.values()}
        self._db.roles[role_id].privilege_keys = {by_id[pid] for pid in privilege_ids}

    async def delete(self, role_id: UUID) -> None:
        if any(a[2] == role_id for a in self._db.assignments):
            raise PersistenceError("role is still referenced by assignments")
        self._db.roles.pop(role_id, None)
        self._db.role_privileges.pop(role_id, None)

    def add_role(self, role: Role) -> Role:
        """Helper to seed a role for tests."""
        self._db.roles[role.id] = copy.deepcopy(role)
        return role


class FakePrivilegeRepository:
    """In-memory privilege catalog."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def resolve(self, keys: list[str]) -> list[Privilege]:
        return [self._db.privileges[k] for k in keys if k in self._db.privileges]

    async def list_all(self) -> list[Privilege]:
        return sorted(self._db.privileges.values(), key=lambda p: p.key)


class FakeAssignmentRepository:
    """In-memory assignment repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self.locked: list[tuple[UUID, UUID]] = []
        self.apply_calls: list[tuple[set[UUID], set[UUID]]] = []
        self.fail_on_apply = False

    async def find_current_roles(self, student_id: UUID, society_id: UUID) -> set[UUID]:
        return {
            role_id
            for st, so, role_id in self._db.assignments
            if st == student_id and so == society_id
        }

    async def apply_diff(
        self,
        student_id: UUID,
        society_id: UUID,
        to_add: set[UUID],
        to_remove: set[UUID],
    ) -> None:
        self.apply_calls.append((set(to_add), set(to_remove)))
        for role_id in to_remove:
            self._db.assignments.discard((student_id, society_id, role_id))
        for role_id in to_add:
            self._db.assignments.add((student_id, society_id, role_id))
        if self.fail_on_apply:
            raise PersistenceError("connection lost during apply")

    async def list_member_ids(self, role_id: UUID) -> set[UUID]:
        return {st for st, _, r in self._db.assignments if r == role_id}

    async def add_members(self, role_id: UUID, society_id: UUID, student_ids: set[UUID]) -> int:
        before = len(self._db.assignments)
        self._db.assignments.update((st, society_id, role_id) for st in student_ids)
        return len(self._db.assignments) - before

    async def remove_members(self, role_id: UUID, student_ids: set[UUID]) -> int:
        doomed = {a for a in self._db.assignments if a[2] == role_id and a[0] in student_ids}
        self._db.assignments -= doomed
        return len(doomed)

    async def delete_by_role(self, role_id: UUID) -> int:
        doomed = {a for a in self._db.assignments if a[2] == role_id}
        self._db.assignments -= doomed
        return len(doomed)

    async def lock_subject(self, student_id: UUID, society_id: UUID) -> None:
        self.locked.append((student_id, society_id))


class FakeMembershipRepository:
    """In-memory membership repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def is_member(self, student_id: UUID, society_id: UUID) -> bool:
        return (student_id, society_id) in self._db.memberships

    async def find_members_of(self, society_id: UUID, candidate_ids: set[UUID]) -> set[UUID]:
        return {c for c in candidate_ids if (c, society_id) in self._db.memberships}

    def add_member(self, student_id: UUID, society_id: UUID) -> None:
        """Helper to seed membership for tests."""
        self._db.memberships.add((student_id, society_id))


class FakeSocietyRepository:
    """In-memory society repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, society_id: UUID) -> Society | None:
        return self._db.societies.get(society_id)

    def add_society(self, society: Society) -> Society:
        self._db.societies[society.id] = society
        return society


class FakeActivityRepository:
    """In-memory activity log."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def create(self, entry: ActivityEntry) -> ActivityEntry:
        self._db.activities.append(entry)
        return entry


class FakeNotificationRepository:
    """In-memory notification store."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def create(self, notification: Notification) -> Notification:
        self._db.notifications.append(notification)
        return notification


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories over one FakeDatabase."""

    def __init__(self, db: FakeDatabase | None = None) -> None:
        self.db = db or FakeDatabase()
        self.roles = FakeRoleRepository(self.db)
        self.privileges = FakePrivilegeRepository(self.db)
        self.assignments = FakeAssignmentRepository(self.db)
        self.memberships = FakeMembershipRepository(self.db)
        self.societies = FakeSocietyRepository(self.db)
        self.activities = FakeActivityRepository(self.db)
        self.notifications = FakeNotificationRepository(self.db)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding ``uow``; state written inside a failing block is rolled back."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        state = uow.db.snapshot()
        try:
            yield uow
        except BaseException:
            uow.db.restore(state)
            raise

    return factory


# --- Seed data ---


@dataclass
class SeededSociety:
    """Society with baseline and officer roles and a few students."""

    society: Society
    member_role: Role
    treasurer: Role
    president: Role
    secretary: Role
    alice: UUID
    bob: UUID
    outsider: UUID


def _role(society_id: UUID, name: str, *keys: PrivilegeKey) -> Role:
    now = datetime.now(UTC)
    return Role(
        id=uuid4(),
        society_id=society_id,
        name=name,
        description=f"{name} of the society",
        privilege_keys={k.value for k in keys},
        created_at=now,
        updated_at=now,
    )


def seed_society(uow: FakeUnitOfWork, name: str = "Robotics Society") -> SeededSociety:
    """Seed a society: Member, Treasurer, President, General Secretary; alice and bob are members."""
    society = uow.societies.add_society(Society(id=uuid4(), name=name, logo="logo.png"))
    member_role = uow.roles.add_role(_role(society.id, "Member"))
    treasurer = uow.roles.add_role(
        _role(society.id, "Treasurer", PrivilegeKey.PAYMENT_FINANCE_MANAGEMENT)
    )
    president = uow.roles.add_role(
        _role(society.id, "President", PrivilegeKey.EVENT_MANAGEMENT, PrivilegeKey.MEMBER_MANAGEMENT)
    )
    secretary = uow.roles.add_role(
        _role(society.id, "General Secretary", PrivilegeKey.TASK_MANAGEMENT)
    )
    alice, bob, outsider = uuid4(), uuid4(), uuid4()
    for student_id in (alice, bob):
        uow.memberships.add_member(student_id, society.id)
        uow.db.assignments.add((student_id, society.id, member_role.id))
    return SeededSociety(
        society=society,
        member_role=member_role,
        treasurer=treasurer,
        president=president,
        secretary=secretary,
        alice=alice,
        bob=bob,
        outsider=outsider,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def seeded(fake_uow: FakeUnitOfWork) -> SeededSociety:
    return seed_society(fake_uow)


@pytest.fixture
def task_runner() -> BackgroundTaskRunner:
    return BackgroundTaskRunner()


@pytest.fixture
def mock_notification_dispatcher() -> AsyncMock:
    """AsyncMock for NotificationDispatcher."""
    mock = AsyncMock()
    mock.notify_role_change.return_value = None
    mock.notify_student_roles.return_value = None
    return mock


@pytest.fixture
def mock_activity_recorder() -> AsyncMock:
    """AsyncMock for ActivityRecorder."""
    mock = AsyncMock()
    mock.record.return_value = None
    return mock


@pytest.fixture
def effects(task_runner, mock_notification_dispatcher, mock_activity_recorder) -> RoleChangeEffects:
    """Role change effects running on a real BackgroundTaskRunner with mocked ports."""
    return RoleChangeEffects(
        scheduler=task_runner,
        notification_dispatcher=mock_notification_dispatcher,
        activity_recorder=mock_activity_recorder,
    )
