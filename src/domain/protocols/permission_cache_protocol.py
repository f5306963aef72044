"""Permission cache protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.permission import Permission


class PermissionCacheProtocol(Protocol):
    """Tenant-scoped cache of permission snapshots."""

    async def get(self, tenant_id: str, permission_id: UUID) -> Permission | None:
        """Return the cached permission, or None on miss or corrupt entry."""
        ...

    async def set(self, permission: Permission) -> None:
        """Cache a snapshot of the permission."""
        ...

    async def delete(self, tenant_id: str, permission_id: UUID) -> None:
        """Evict a permission."""
        ...
