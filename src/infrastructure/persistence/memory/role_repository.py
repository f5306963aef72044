"""In-memory RoleRepository."""

from collections.abc import Callable
from copy import deepcopy
from uuid import UUID

from src.domain.entities.role import Role
from src.domain.enums import RoleStatus


class InMemoryRoleRepository:
    """Dict-backed implementation of the RoleRepository protocol.

    find_by_id returns soft-deleted roles; the other finders skip them.
    """

    def __init__(self, roles: list[Role] | None = None) -> None:
        self._roles: dict[UUID, Role] = {}
        for role in roles or []:
            self._roles[role.id] = deepcopy(role)

    async def find_by_id(self, role_id: UUID, tenant_id: str) -> Role | None:
        role = self._roles.get(role_id)
        if role is None or role.tenant_id != tenant_id:
            return None
        return deepcopy(role)

    async def find_by_code(self, code: str, tenant_id: str) -> Role | None:
        return self._first(tenant_id, lambda r: r.code == code)

    async def find_by_name(self, name: str, tenant_id: str) -> Role | None:
        return self._first(tenant_id, lambda r: r.name == name)

    async def find_by_tenant(
        self, tenant_id: str, status: RoleStatus | None = None
    ) -> list[Role]:
        roles = [
            deepcopy(r)
            for r in self._roles.values()
            if r.tenant_id == tenant_id
            and not r.is_deleted()
            and (status is None or r.status == status)
        ]
        return sorted(roles, key=lambda r: (-r.priority, r.code))

    async def save(self, role: Role) -> None:
        self._roles[role.id] = deepcopy(role)

    def _first(self, tenant_id: str, predicate: Callable[[Role], bool]) -> Role | None:
        for role in self._roles.values():
            if role.tenant_id == tenant_id and not role.is_deleted() and predicate(role):
                return deepcopy(role)
        return None
