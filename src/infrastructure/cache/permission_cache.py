"""Permission cache (implements PermissionCacheProtocol).

Snapshots keep the condition list in its wire shape, so a cached permission
re-validates its conditions when it is rebuilt.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from src.core.result import Failure, Success
from src.domain.entities.permission import Permission
from src.domain.enums import PermissionStatus, PermissionType
from src.domain.protocols import CacheProtocol, LoggerProtocol
from src.domain.value_objects import PermissionConditions
from src.infrastructure.cache.cache_keys import TenantCacheKeys


def permission_to_snapshot(permission: Permission) -> dict[str, Any]:
    """Serialize a permission into a JSON-safe dict."""
    return {
        "id": str(permission.id),
        "tenant_id": permission.tenant_id,
        "code": permission.code,
        "name": permission.name,
        "type": permission.type.value,
        "action": permission.action,
        "resource": permission.resource,
        "status": permission.status.value,
        "conditions": permission.conditions.to_list(),
        "fields": list(permission.fields),
        "created_at": permission.created_at.isoformat(),
        "updated_at": permission.updated_at.isoformat(),
    }


def permission_from_snapshot(data: dict[str, Any]) -> Permission:
    """Rebuild a permission from a snapshot.

    Raises:
        KeyError, TypeError, ValueError: If the snapshot is malformed.
    """
    match PermissionConditions.create(data.get("conditions") or []):
        case Failure(error=error):
            raise ValueError(error.message)
        case Success(value=conditions):
            pass

    return Permission(
        id=UUID(data["id"]),
        tenant_id=data["tenant_id"],
        code=data["code"],
        name=data["name"],
        type=PermissionType(data["type"]),
        action=data["action"],
        resource=data.get("resource"),
        status=PermissionStatus(data["status"]),
        conditions=conditions,
        fields=list(data.get("fields") or []),
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
    )


class PermissionCache:
    """Typed permission facade over a CacheProtocol."""

    def __init__(
        self,
        cache: CacheProtocol,
        keys: TenantCacheKeys,
        logger: LoggerProtocol,
        ttl_seconds: int = 1800,
    ) -> None:
        self._cache = cache
        self._keys = keys
        self._logger = logger
        self._ttl = ttl_seconds

    async def get(self, tenant_id: str, permission_id: UUID) -> Permission | None:
        key = self._keys.permission(tenant_id, permission_id)
        data = await self._cache.get(key)
        if data is None:
            return None
        try:
            return permission_from_snapshot(data)
        except (KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "Corrupt permission cache entry dropped",
                key=key,
                error_type=type(e).__name__,
            )
            await self._cache.delete(key)
            return None

    async def set(self, permission: Permission) -> None:
        await self._cache.set(
            self._keys.permission(permission.tenant_id, permission.id),
            permission_to_snapshot(permission),
            ttl=self._ttl,
        )

    async def delete(self, tenant_id: str, permission_id: UUID) -> None:
        await self._cache.delete(self._keys.permission(tenant_id, permission_id))
