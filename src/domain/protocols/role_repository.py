"""RoleRepository protocol for role persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Role
from src.domain.enums import RoleStatus


class RoleRepository(Protocol):
    """Role repository protocol (port).

    find_by_id returns roles in any status so callers can tell a deleted
    role from a suspended one. The other finders skip soft-deleted roles.
    """

    async def find_by_id(self, role_id: UUID, tenant_id: str) -> Role | None:
        """Find a role by ID within a tenant (soft-deleted roles included)."""
        ...

    async def find_by_code(self, code: str, tenant_id: str) -> Role | None:
        """Find a role by its tenant-unique code."""
        ...

    async def find_by_name(self, name: str, tenant_id: str) -> Role | None:
        """Find a role by its tenant-unique name."""
        ...

    async def find_by_tenant(
        self, tenant_id: str, status: RoleStatus | None = None
    ) -> list[Role]:
        """List roles of a tenant, optionally filtered by status."""
        ...

    async def save(self, role: Role) -> None:
        """Insert or update a role."""
        ...
