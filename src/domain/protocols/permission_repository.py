"""PermissionRepository protocol for permission persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.permission import Permission


class PermissionRepository(Protocol):
    """Permission repository protocol (port)."""

    async def find_by_id(self, permission_id: UUID, tenant_id: str) -> Permission | None:
        """Find a permission by ID within a tenant."""
        ...

    async def find_by_code(self, code: str, tenant_id: str) -> Permission | None:
        """Find a permission by its tenant-unique code."""
        ...

    async def save(self, permission: Permission) -> None:
        """Insert or update a permission."""
        ...
