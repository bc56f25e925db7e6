"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from societyhub.application.ports.repositories import (
    ActivityRepository,
    AssignmentRepository,
    MembershipRepository,
    NotificationRepository,
    PrivilegeRepository,
    RoleRepository,
    SocietyRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def privileges(self) -> PrivilegeRepository: ...

    @property
    def assignments(self) -> AssignmentRepository: ...

    @property
    def memberships(self) -> MembershipRepository: ...

    @property
    def societies(self) -> SocietyRepository: ...

    @property
    def activities(self) -> ActivityRepository: ...

    @property
    def notifications(self) -> NotificationRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
