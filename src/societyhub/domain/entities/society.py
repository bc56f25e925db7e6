"""Society entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Society:
    """Society - organizational unit scoping roles and membership."""

    id: UUID
    name: str
    logo: str | None = None
