"""In-memory PermissionRepository."""

from copy import deepcopy
from uuid import UUID

from src.domain.entities.permission import Permission


class InMemoryPermissionRepository:
    """Dict-backed implementation of the PermissionRepository protocol."""

    def __init__(self, permissions: list[Permission] | None = None) -> None:
        self._permissions: dict[UUID, Permission] = {}
        for permission in permissions or []:
            self._permissions[permission.id] = deepcopy(permission)

    async def find_by_id(self, permission_id: UUID, tenant_id: str) -> Permission | None:
        permission = self._permissions.get(permission_id)
        if permission is None or permission.tenant_id != tenant_id:
            return None
        return deepcopy(permission)

    async def find_by_code(self, code: str, tenant_id: str) -> Permission | None:
        for permission in self._permissions.values():
            if permission.tenant_id == tenant_id and permission.code == code:
                return deepcopy(permission)
        return None

    async def save(self, permission: Permission) -> None:
        self._permissions[permission.id] = deepcopy(permission)
