"""Role cache (implements RoleCacheProtocol).

Stores JSON-safe role snapshots in the generic cache under
{prefix}:{tenant}:role:{id}. A snapshot that cannot be turned back into a
Role is deleted and reported as a miss.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.entities.role import Role
from src.domain.enums import RoleStatus
from src.domain.protocols import CacheProtocol, LoggerProtocol
from src.infrastructure.cache.cache_keys import TenantCacheKeys


def role_to_snapshot(role: Role) -> dict[str, Any]:
    """Serialize a role into a JSON-safe dict."""
    return {
        "id": str(role.id),
        "tenant_id": role.tenant_id,
        "name": role.name,
        "code": role.code,
        "description": role.description,
        "status": role.status.value,
        "priority": role.priority,
        "user_ids": [str(u) for u in role.user_ids],
        "permission_ids": [str(p) for p in role.permission_ids],
        "max_users": role.max_users,
        "expires_at": _iso(role.expires_at),
        "is_system_role": role.is_system_role,
        "is_default_role": role.is_default_role,
        "parent_role_id": _str(role.parent_role_id),
        "child_role_ids": [str(c) for c in role.child_role_ids],
        "created_by": _str(role.created_by),
        "created_at": role.created_at.isoformat(),
        "updated_at": role.updated_at.isoformat(),
        "deleted_at": _iso(role.deleted_at),
    }


def role_from_snapshot(data: dict[str, Any]) -> Role:
    """Rebuild a role from a snapshot.

    Raises:
        KeyError, TypeError, ValueError: If the snapshot is malformed.
    """
    return Role(
        id=UUID(data["id"]),
        tenant_id=data["tenant_id"],
        name=data["name"],
        code=data["code"],
        description=data.get("description"),
        status=RoleStatus(data["status"]),
        priority=int(data.get("priority", 0)),
        user_ids=[UUID(u) for u in data["user_ids"]],
        permission_ids=[UUID(p) for p in data.get("permission_ids", [])],
        max_users=data.get("max_users"),
        expires_at=_dt(data.get("expires_at")),
        is_system_role=bool(data.get("is_system_role", False)),
        is_default_role=bool(data.get("is_default_role", False)),
        parent_role_id=_uuid(data.get("parent_role_id")),
        child_role_ids=[UUID(c) for c in data.get("child_role_ids", [])],
        created_by=_uuid(data.get("created_by")),
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
        deleted_at=_dt(data.get("deleted_at")),
    )


class RoleCache:
    """Typed role facade over a CacheProtocol."""

    def __init__(
        self,
        cache: CacheProtocol,
        keys: TenantCacheKeys,
        logger: LoggerProtocol,
        ttl_seconds: int = 3600,
    ) -> None:
        self._cache = cache
        self._keys = keys
        self._logger = logger
        self._ttl = ttl_seconds

    async def get(self, tenant_id: str, role_id: UUID) -> Role | None:
        key = self._keys.role(tenant_id, role_id)
        data = await self._cache.get(key)
        if data is None:
            return None
        try:
            return role_from_snapshot(data)
        except (KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "Corrupt role cache entry dropped",
                key=key,
                error_type=type(e).__name__,
            )
            await self._cache.delete(key)
            return None

    async def set(self, role: Role) -> None:
        await self._cache.set(
            self._keys.role(role.tenant_id, role.id),
            role_to_snapshot(role),
            ttl=self._ttl,
        )

    async def delete(self, tenant_id: str, role_id: UUID) -> None:
        await self._cache.delete(self._keys.role(tenant_id, role_id))

    async def invalidate_lists(self, tenant_id: str) -> int:
        return await self._cache.delete_prefix(self._keys.role_lists_prefix(tenant_id))


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value is not None else None


def _str(value: UUID | None) -> str | None:
    return str(value) if value is not None else None


def _uuid(value: str | None) -> UUID | None:
    return UUID(value) if value is not None else None
