"""Privilege entity - catalog entry."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Privilege:
    """Privilege - atomic permission key attachable to roles."""

    id: UUID
    key: str
    title: str = ""
    description: str | None = None
