"""Privilege repository port."""

from typing import Protocol

from societyhub.domain.entities import Privilege


class PrivilegeRepository(Protocol):
    """Port for the privilege catalog."""

    async def resolve(self, keys: list[str]) -> list[Privilege]: ...

    async def list_all(self) -> list[Privilege]: ...
