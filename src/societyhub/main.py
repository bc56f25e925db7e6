"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from societyhub import __version__
from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.application.ports import UnitOfWorkFactory
from societyhub.application.use_cases.assignment.reconcile_student_roles import (
    ReconcileStudentRolesUseCase,
)
from societyhub.application.use_cases.membership.validate_membership import (
    MembershipValidator,
)
from societyhub.application.use_cases.role.create_role import CreateRoleUseCase
from societyhub.application.use_cases.role.delete_role import DeleteRoleUseCase
from societyhub.application.use_cases.role.list_roles import ListSocietyRolesUseCase
from societyhub.application.use_cases.role.provision_roles import (
    ProvisionSocietyRolesUseCase,
)
from societyhub.application.use_cases.role.update_role import UpdateRoleUseCase
from societyhub.config import Settings, get_settings
from societyhub.infrastructure.activity.activity_recorder import DatabaseActivityRecorder
from societyhub.infrastructure.auth.keycloak_provider import KeycloakProvider
from societyhub.infrastructure.notification.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from societyhub.infrastructure.persistence.postgres.connection import create_pool
from societyhub.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from societyhub.infrastructure.tasks.background import BackgroundTaskRunner
from societyhub.interfaces.api.middleware.auth import AuthMiddleware
from societyhub.interfaces.api.middleware.cors import CORSMiddleware
from societyhub.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from societyhub.interfaces.api.resources.health import HealthResource
from societyhub.interfaces.api.resources.roles import (
    SocietyDefaultRolesResource,
    SocietyRoleResource,
    SocietyRolesResource,
)
from societyhub.interfaces.api.resources.student_roles import StudentRolesResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def add_routes(
    app: falcon.asgi.App,
    uow_factory: UnitOfWorkFactory,
    effects: RoleChangeEffects,
    settings: Settings,
    health_resource: HealthResource,
) -> None:
    """Build use cases and register routes on ``app``."""
    baseline = settings.baseline_role_name
    membership_validator = MembershipValidator(uow_factory)
    list_roles = ListSocietyRolesUseCase(uow_factory, baseline_role_name=baseline)
    create_role = CreateRoleUseCase(uow_factory, effects)
    update_role = UpdateRoleUseCase(
        uow_factory,
        effects,
        baseline_role_name=baseline,
        notify_removed_members=settings.notify_removed_on_role_update,
    )
    delete_role = DeleteRoleUseCase(uow_factory, effects, baseline_role_name=baseline)
    provision_roles = ProvisionSocietyRolesUseCase(
        uow_factory, effects, baseline_role_name=baseline
    )
    reconcile = ReconcileStudentRolesUseCase(
        uow_factory,
        membership_validator,
        effects,
        baseline_role_name=baseline,
        serialize=settings.serialize_role_reconciliation,
    )

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route(
        "/v1/societies/{society_id}/roles",
        SocietyRolesResource(list_roles, create_role),
    )
    app.add_route(
        "/v1/societies/{society_id}/roles/defaults",
        SocietyDefaultRolesResource(provision_roles),
    )
    app.add_route(
        "/v1/societies/{society_id}/roles/{role_id}",
        SocietyRoleResource(update_role, delete_role),
    )
    app.add_route(
        "/v1/societies/{society_id}/students/{student_id}/roles",
        StudentRolesResource(reconcile),
    )


def create_societyhub_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
        timeout=settings.database_pool_timeout,
    )
    uow_factory = create_uow_factory(pool, batch_size=settings.assignment_batch_size)
    task_runner = BackgroundTaskRunner()
    effects = RoleChangeEffects(
        scheduler=task_runner,
        notification_dispatcher=RoleNotificationDispatcher(
            uow_factory, baseline_role_name=settings.baseline_role_name
        ),
        activity_recorder=DatabaseActivityRecorder(uow_factory),
    )

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET is not set; every request is rejected as unauthenticated")

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(
                pool, task_runner, drain_timeout=settings.background_drain_timeout
            ),
            AuthMiddleware(keycloak),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    add_routes(app, uow_factory, effects, settings, HealthResource(pool))
    return app


def main() -> None:
    """Run uvicorn server."""
    import uvicorn

    print(f"SocietyHub v{__version__}")
    uvicorn.run(
        "societyhub.main:create_societyhub_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
