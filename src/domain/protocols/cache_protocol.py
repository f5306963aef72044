"""Cache protocol for domain layer.

This module defines the cache interface that the identity core needs, without
knowing about any specific implementation.

Architecture:
- Protocol-based - uses structural typing
- Values are JSON-safe snapshots (dicts, lists, scalars), never live entities
- Fail-open: a disabled or empty cache reports a miss, never an error
- Keys are tenant-scoped (see TenantCacheKeys)
"""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Cache protocol - what the core needs from a cache.

    Implementations:
        - MemoryCache: in-process TTL cache with max-size eviction

    Example:
        cached = await cache.get(keys.role(tenant_id, role_id))
        if cached is None:
            role = await role_repository.find_by_id(role_id, tenant_id)
            await cache.set(keys.role(tenant_id, role_id), snapshot(role), ttl=3600)
    """

    async def get(self, key: str) -> Any | None:
        """Get a value, or None on miss, expiry or when caching is disabled."""
        ...

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a value.

        Args:
            key: Cache key.
            value: JSON-safe value.
            ttl: Time to live in seconds (None = implementation default).
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a key. Returns True if it existed."""
        ...

    async def exists(self, key: str) -> bool:
        """Check whether an unexpired entry exists."""
        ...

    async def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with prefix. Returns the number deleted."""
        ...

    async def clear(self) -> None:
        """Drop every entry."""
        ...
