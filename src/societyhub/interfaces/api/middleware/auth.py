"""Auth middleware - extracts user from bearer token."""

from dataclasses import dataclass
from uuid import UUID

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: UUID
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.user (None if absent or invalid)."""

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        user = await self._keycloak.decode_token(auth[7:])
        if user:
            req.context.user = RequestUser(
                user_id=user.user_id,
                email=user.email,
                username=user.username,
            )
