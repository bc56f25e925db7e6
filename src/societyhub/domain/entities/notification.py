"""Notification entity - in-app notification with recipients."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Notification:
    """Notification - title and description delivered to students."""

    id: UUID
    title: str
    description: str
    created_at: datetime
    image: str | None = None
    recipient_ids: list[UUID] = field(default_factory=list)
    web_redirect_url: str | None = None
    mobile_redirect_url: str | None = None
