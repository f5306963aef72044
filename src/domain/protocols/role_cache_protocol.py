"""Role cache protocol.

Typed facade over the generic cache for role snapshots. Cached roles are
copies; the repository stays authoritative.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Role


class RoleCacheProtocol(Protocol):
    """Tenant-scoped cache of role snapshots."""

    async def get(self, tenant_id: str, role_id: UUID) -> Role | None:
        """Return the cached role, or None on miss or corrupt entry."""
        ...

    async def set(self, role: Role) -> None:
        """Cache a snapshot of the role."""
        ...

    async def delete(self, tenant_id: str, role_id: UUID) -> None:
        """Evict a role."""
        ...

    async def invalidate_lists(self, tenant_id: str) -> int:
        """Evict every cached role listing of the tenant.

        Returns:
            Number of evicted entries.
        """
        ...
