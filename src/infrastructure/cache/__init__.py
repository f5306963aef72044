"""Cache infrastructure.

Exports:
    MemoryCache: In-process TTL cache (CacheProtocol)
    TenantCacheKeys: Tenant-scoped key builder
    RoleCache / PermissionCache: Typed snapshot caches
"""

from src.infrastructure.cache.cache_keys import TenantCacheKeys
from src.infrastructure.cache.memory_cache import CacheEntry, CacheStats, MemoryCache
from src.infrastructure.cache.permission_cache import PermissionCache
from src.infrastructure.cache.role_cache import RoleCache

__all__ = [
    "CacheEntry",
    "CacheStats",
    "MemoryCache",
    "PermissionCache",
    "RoleCache",
    "TenantCacheKeys",
]
