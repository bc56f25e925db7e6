"""Keycloak OIDC provider for JWT validation."""

import logging
from dataclasses import dataclass
from uuid import UUID

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated student or advisor from an OIDC token."""

    user_id: UUID
    email: str | None
    username: str | None
    realm_roles: list[str]


class KeycloakProvider:
    """Keycloak OIDC - validates JWT and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None when inactive or invalid."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError:
            logger.warning("Token introspection failed", exc_info=True)
            return None
        if not token_info.get("active"):
            return None
        try:
            user_id = UUID(token_info.get("sub", ""))
        except ValueError:
            logger.warning("Token subject is not a UUID")
            return None
        return OIDCUser(
            user_id=user_id,
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )
