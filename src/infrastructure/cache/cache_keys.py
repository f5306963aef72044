"""Cache key construction utilities.

All keys follow the pattern {prefix}:{tenant_id}:{resource}:{id} so that a
whole tenant, or one resource family within it, can be invalidated by prefix.

Usage:
    from src.core.config import get_settings
    from src.infrastructure.cache.cache_keys import TenantCacheKeys

    keys = TenantCacheKeys(prefix=get_settings().cache_key_prefix)
    keys.role("acme", role_id)        # "gatekeeper:acme:role:<id>"
    keys.role_list("acme", page=2)    # "gatekeeper:acme:roles:list:page=2"
    keys.role_lists_prefix("acme")    # "gatekeeper:acme:roles:list:"
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class TenantCacheKeys:
    """Centralized tenant-scoped cache key construction.

    Attributes:
        prefix: Cache key prefix (typically "gatekeeper").
    """

    prefix: str = "gatekeeper"

    def tenant_prefix(self, tenant_id: str) -> str:
        """Prefix of every key of a tenant."""
        return f"{self.prefix}:{tenant_id}:"

    def role(self, tenant_id: str, role_id: UUID) -> str:
        return f"{self.prefix}:{tenant_id}:role:{role_id}"

    def role_list(self, tenant_id: str, **filters: object) -> str:
        """Key of a cached role listing; filters are encoded in sorted order."""
        suffix = ",".join(f"{k}={v}" for k, v in sorted(filters.items()))
        return f"{self.role_lists_prefix(tenant_id)}{suffix or 'all'}"

    def role_lists_prefix(self, tenant_id: str) -> str:
        return f"{self.prefix}:{tenant_id}:roles:list:"

    def permission(self, tenant_id: str, permission_id: UUID) -> str:
        return f"{self.prefix}:{tenant_id}:permission:{permission_id}"

    def permission_lists_prefix(self, tenant_id: str) -> str:
        return f"{self.prefix}:{tenant_id}:permissions:list:"

    def revoked_token(self, jti: str) -> str:
        """Revocation marker of a token id (token ids are globally unique)."""
        return f"{self.prefix}:revoked:{jti}"
