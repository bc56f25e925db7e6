"""Activity log repository port."""

from typing import Protocol

from societyhub.domain.entities import ActivityEntry


class ActivityRepository(Protocol):
    """Port for activity log persistence."""

    async def create(self, entry: ActivityEntry) -> ActivityEntry: ...
