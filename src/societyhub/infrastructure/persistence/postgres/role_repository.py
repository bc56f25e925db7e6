"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from societyhub.domain.entities import Role
from societyhub.domain.exceptions import DuplicateRoleError

_SELECT_ROLE = (
    "SELECT r.id, r.society_id, r.name, r.description, r.min_semester, "
    "r.created_at, r.updated_at, "
    "COALESCE(array_agg(p.key) FILTER (WHERE p.key IS NOT NULL), '{}') "
    "FROM role r "
    "LEFT JOIN role_privilege rp ON rp.role_id = r.id "
    "LEFT JOIN privilege p ON p.id = rp.privilege_id "
)
_GROUP_ROLE = " GROUP BY r.id"


def _duplicate(role: Role) -> DuplicateRoleError:
    # Raised by the unique index on (society_id, lower(name)).
    return DuplicateRoleError(f"A role named '{role.name}' already exists in this society")


def _row_to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        society_id=r[1],
        name=r[2],
        description=r[3],
        min_semester=r[4],
        created_at=r[5],
        updated_at=r[6],
        privilege_keys=set(r[7]),
    )


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            _SELECT_ROLE + "WHERE r.id = %s" + _GROUP_ROLE,
            (role_id,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list_by_society(self, society_id: UUID) -> list[Role]:
        """List roles of a society, oldest first."""
        cur = await self._conn.execute(
            _SELECT_ROLE + "WHERE r.society_id = %s" + _GROUP_ROLE
            + " ORDER BY r.created_at, r.name",
            (society_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def list_by_ids(self, society_id: UUID, role_ids: set[UUID]) -> list[Role]:
        """Roles among ``role_ids`` that belong to the society."""
        if not role_ids:
            return []
        cur = await self._conn.execute(
            _SELECT_ROLE + "WHERE r.society_id = %s AND r.id = ANY(%s)" + _GROUP_ROLE,
            (society_id, list(role_ids)),
        )
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def find_by_name(
        self, society_id: UUID, name: str, exclude_id: UUID | None = None
    ) -> Role | None:
        """Find role by case-insensitive name within a society."""
        query = _SELECT_ROLE + "WHERE r.society_id = %s AND lower(r.name) = lower(%s)"
        params: tuple = (society_id, name.strip())
        if exclude_id is not None:
            query += " AND r.id <> %s"
            params += (exclude_id,)
        cur = await self._conn.execute(query + _GROUP_ROLE, params)
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def get_baseline(self, society_id: UUID, baseline_name: str) -> Role | None:
        """Get the society's baseline role."""
        return await self.find_by_name(society_id, baseline_name)

    async def create(self, role: Role) -> Role:
        """Create role row. Privilege links are set separately."""
        try:
            await self._conn.execute(
                "INSERT INTO role (id, society_id, name, description, min_semester, created_at, updated_at) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s)",
                (
                    role.id,
                    role.society_id,
                    role.name,
                    role.description,
                    role.min_semester,
                    role.created_at,
                    role.updated_at,
                ),
            )
        except UniqueViolation as exc:
            raise _duplicate(role) from exc
        return role

    async def update(self, role: Role) -> None:
        """Update role fields."""
        try:
            await self._conn.execute(
                "UPDATE role SET name=%s, description=%s, min_semester=%s, updated_at=%s "
                "WHERE id=%s",
                (role.name, role.description, role.min_semester, role.updated_at, role.id),
            )
        except UniqueViolation as exc:
            raise _duplicate(role) from exc

    async def set_privileges(self, role_id: UUID, privilege_ids: list[UUID]) -> None:
        """Replace the role's privilege links."""
        await self._conn.execute(
            "DELETE FROM role_privilege WHERE role_id = %s",
            (role_id,),
        )
        if not privilege_ids:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_privilege (role_id, privilege_id) VALUES (%s, %s)",
                [(role_id, pid) for pid in privilege_ids],
            )

    async def delete(self, role_id: UUID) -> None:
        """Delete role."""
        await self._conn.execute(
            "DELETE FROM role WHERE id = %s",
            (role_id,),
        )
