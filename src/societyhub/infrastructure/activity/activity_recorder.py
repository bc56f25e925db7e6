"""Activity recorder - appends activity log entries."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from societyhub.domain.entities import ActivityEntry
from societyhub.domain.value_objects import ActionNature

logger = logging.getLogger(__name__)


class DatabaseActivityRecorder:
    """Writes activity entries through its own unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def record(
        self,
        actor_id: UUID,
        society_id: UUID,
        action: str,
        description: str,
        target_id: UUID | None,
        target_type: str | None,
        nature: ActionNature,
    ) -> None:
        entry = ActivityEntry(
            id=uuid4(),
            actor_id=actor_id,
            society_id=society_id,
            action=action,
            description=description,
            nature=nature,
            created_at=datetime.now(UTC),
            target_id=target_id,
            target_type=target_type,
        )
        async with self._uow_factory() as uow:
            await uow.activities.create(entry)
        logger.debug("Recorded %s activity in society %s", action, society_id)
