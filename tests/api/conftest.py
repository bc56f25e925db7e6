"""Fixtures for API tests."""

from unittest.mock import AsyncMock
from uuid import uuid4

import falcon.asgi
import pytest
from falcon.testing import TestClient

from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.config import Settings
from societyhub.interfaces.api.middleware.auth import RequestUser
from societyhub.interfaces.api.resources.health import HealthResource
from societyhub.main import add_routes


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing."""

    def __init__(self) -> None:
        self.user = RequestUser(user_id=uuid4(), username="officer")

    async def process_request(self, req, resp):
        req.context.user = self.user


class RecordingScheduler:
    """Scheduler that records task names and discards the coroutines."""

    def __init__(self) -> None:
        self.names: list[str] = []

    def spawn(self, coro, name: str) -> None:
        self.names.append(name)
        coro.close()


@pytest.fixture
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def app(uow_factory, scheduler):
    """Falcon ASGI app with API resources for testing."""
    effects = RoleChangeEffects(
        scheduler=scheduler,
        notification_dispatcher=AsyncMock(),
        activity_recorder=AsyncMock(),
    )
    app = falcon.asgi.App(middleware=[AuthBypassMiddleware()])
    add_routes(app, uow_factory, effects, Settings(), HealthResource())
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
