"""Activity log entry entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from societyhub.domain.value_objects import ActionNature


@dataclass
class ActivityEntry:
    """Audit trail entry - who did what to which target in a society."""

    id: UUID
    actor_id: UUID
    society_id: UUID
    action: str
    description: str
    nature: ActionNature
    created_at: datetime
    target_id: UUID | None = None
    target_type: str | None = None
