"""Society role API resources."""

from typing import Any
from uuid import UUID

import falcon
import falcon.asgi

from societyhub.application.dto.role_dto import RoleCreateInput, RoleUpdateInput
from societyhub.application.use_cases.role.create_role import CreateRoleUseCase
from societyhub.application.use_cases.role.delete_role import DeleteRoleUseCase
from societyhub.application.use_cases.role.list_roles import ListSocietyRolesUseCase
from societyhub.application.use_cases.role.provision_roles import ProvisionSocietyRolesUseCase
from societyhub.application.use_cases.role.update_role import UpdateRoleUseCase
from societyhub.domain.entities import Role
from societyhub.domain.exceptions import SocietyHubError, ValidationError
from societyhub.interfaces.api.errors import parse_uuid, parse_uuid_list, write_error


def role_to_dict(role: Role, member_ids: set[UUID] | None = None) -> dict[str, Any]:
    """Serialize role for responses."""
    data: dict[str, Any] = {
        "id": str(role.id),
        "society_id": str(role.society_id),
        "name": role.name,
        "description": role.description,
        "min_semester": role.min_semester,
        "privileges": sorted(role.privilege_keys),
        "created_at": role.created_at.isoformat() if role.created_at else None,
        "updated_at": role.updated_at.isoformat() if role.updated_at else None,
    }
    if member_ids is not None:
        data["member_ids"] = sorted(str(m) for m in member_ids)
    return data


async def _read_body(req: falcon.asgi.Request) -> dict[str, Any]:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


class SocietyRolesResource:
    """GET/POST /v1/societies/{society_id}/roles - list and create roles."""

    def __init__(
        self,
        list_roles: ListSocietyRolesUseCase,
        create_role: CreateRoleUseCase,
    ) -> None:
        self._list = list_roles
        self._create = create_role

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        society_id: str,
    ) -> None:
        """List roles with privileges and member ids."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            items = await self._list.execute(
                parse_uuid(society_id, "society id"),
                include_baseline=req.get_param_as_bool("include_baseline", default=False),
            )
        except SocietyHubError as e:
            write_error(resp, e)
            return

        resp.media = {"items": [role_to_dict(i.role, i.member_ids) for i in items]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        society_id: str,
    ) -> None:
        """Create role and assign it to members."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await _read_body(req)
            input_data = RoleCreateInput(
                society_id=parse_uuid(society_id, "society id"),
                name=body.get("name"),
                privilege_keys=body.get("privileges"),
                description=body.get("description"),
                min_semester=body.get("min_semester"),
                member_ids=(
                    parse_uuid_list(body["members"], "members")
                    if body.get("members") is not None
                    else None
                ),
            )
            role = await self._create.execute(user.user_id, input_data)
        except SocietyHubError as e:
            write_error(resp, e)
            return

        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class SocietyRoleResource:
    """PUT/DELETE /v1/societies/{society_id}/roles/{role_id}."""

    def __init__(
        self,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._update = update_role
        self._delete = delete_role

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        society_id: str,
        role_id: str,
    ) -> None:
        """Update role; ``members`` replaces the assignment list."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await _read_body(req)
            input_data = RoleUpdateInput(
                role_id=parse_uuid(role_id, "role id"),
                society_id=parse_uuid(society_id, "society id"),
                name=body.get("name"),
                description=body.get("description"),
                min_semester=body.get("min_semester"),
                privilege_keys=body.get("privileges"),
                member_ids=(
                    parse_uuid_list(body["members"], "members")
                    if body.get("members") is not None
                    else None
                ),
            )
            role = await self._update.execute(user.user_id, input_data)
        except SocietyHubError as e:
            write_error(resp, e)
            return

        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        society_id: str,
        role_id: str,
    ) -> None:
        """Delete role and its assignments."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._delete.execute(
                user.user_id,
                parse_uuid(role_id, "role id"),
                parse_uuid(society_id, "society id"),
            )
        except SocietyHubError as e:
            write_error(resp, e)
            return

        resp.status = falcon.HTTP_204


class SocietyDefaultRolesResource:
    """POST /v1/societies/{society_id}/roles/defaults - provision default roles."""

    def __init__(self, provision_roles: ProvisionSocietyRolesUseCase) -> None:
        self._provision = provision_roles

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        society_id: str,
    ) -> None:
        """Create the baseline and officer roles that are missing."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            created = await self._provision.execute(
                user.user_id, parse_uuid(society_id, "society id")
            )
        except SocietyHubError as e:
            write_error(resp, e)
            return

        resp.media = {"items": [role_to_dict(r) for r in created]}
        resp.status = falcon.HTTP_201 if created else falcon.HTTP_200
