"""Student role reconciliation API resource."""

import falcon
import falcon.asgi

from societyhub.application.use_cases.assignment.reconcile_student_roles import (
    ReconcileStudentRolesUseCase,
)
from societyhub.domain.exceptions import SocietyHubError, ValidationError
from societyhub.interfaces.api.errors import parse_uuid, parse_uuid_list, write_error
from societyhub.interfaces.api.resources.roles import role_to_dict


class StudentRolesResource:
    """PUT /v1/societies/{society_id}/students/{student_id}/roles - reconcile roles."""

    def __init__(self, reconcile: ReconcileStudentRolesUseCase) -> None:
        self._reconcile = reconcile

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        society_id: str,
        student_id: str,
    ) -> None:
        """Set the student's roles. Omitting ``role_ids`` keeps current roles;
        ``"role_ids": []`` strips all but the baseline role.
        """
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media(default_when_empty={})
            if not isinstance(body, dict):
                raise ValidationError("Request body must be a JSON object")
            role_ids = (
                parse_uuid_list(body["role_ids"], "role_ids") if "role_ids" in body else None
            )
            result = await self._reconcile.execute(
                user.user_id,
                parse_uuid(student_id, "student id"),
                parse_uuid(society_id, "society id"),
                role_ids,
            )
        except SocietyHubError as e:
            write_error(resp, e)
            return

        resp.media = {
            "message": result.message,
            "roles": [role_to_dict(r) for r in result.applied_roles],
            "added": sorted(str(r) for r in result.added),
            "removed": sorted(str(r) for r in result.removed),
        }
        resp.status = falcon.HTTP_200
