"""Society repository port."""

from typing import Protocol
from uuid import UUID

from societyhub.domain.entities import Society


class SocietyRepository(Protocol):
    """Port for reading societies."""

    async def get_by_id(self, society_id: UUID) -> Society | None: ...
