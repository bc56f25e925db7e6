"""Notification repository port."""

from typing import Protocol

from societyhub.domain.entities import Notification


class NotificationRepository(Protocol):
    """Port for in-app notification persistence."""

    async def create(self, notification: Notification) -> Notification: ...
