"""Assignment entity - student holds role in society."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Assignment:
    """Assignment - unique per (student, society, role)."""

    student_id: UUID
    society_id: UUID
    role_id: UUID
    assigned_at: datetime | None = None
