"""Activity recorder port - audit trail append."""

from typing import Protocol
from uuid import UUID

from societyhub.domain.value_objects import ActionNature


class ActivityRecorder(Protocol):
    """Port for recording society activity."""

    async def record(
        self,
        actor_id: UUID,
        society_id: UUID,
        action: str,
        description: str,
        target_id: UUID | None,
        target_type: str | None,
        nature: ActionNature,
    ) -> None: ...
