"""Role entity - a privilege-bearing position inside a society."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Role:
    """Role - named set of privilege keys scoped to one society."""

    id: UUID
    society_id: UUID
    name: str
    description: str | None = None
    min_semester: int | None = None
    privilege_keys: set[str] = field(default_factory=set)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_named(self, name: str) -> bool:
        """Case-insensitive name comparison, matching the lower(name) index."""
        return self.name.lower() == name.strip().lower()
