"""Token revocation registries (implement TokenRevocationProtocol).

A revoked token id (jti) is remembered until the token would have expired;
after that the signature check alone rejects it.

Adapters:
    - InMemoryRevocationRegistry: process-local, backed by a MemoryCache
    - RedisRevocationRegistry: shared across processes (SET key 1 EX ttl)
"""

from redis.asyncio import Redis

from src.infrastructure.cache.cache_keys import TenantCacheKeys
from src.infrastructure.cache.memory_cache import MemoryCache


class InMemoryRevocationRegistry:
    """Revocation registry in an always-enabled, unbounded MemoryCache.

    The registry owns its cache: disabling the shared data cache must never
    make a revoked token valid again, and a marker may only leave the cache
    by expiring with its token, never by eviction.
    """

    def __init__(self, cache: MemoryCache, keys: TenantCacheKeys) -> None:
        if not cache.enabled:
            raise ValueError("Revocation registry needs an enabled cache")
        if cache.max_size is not None:
            raise ValueError("Revocation registry needs an unbounded cache")
        self._cache = cache
        self._keys = keys

    async def revoke(self, jti: str, ttl_seconds: int) -> None:
        await self._cache.set(self._keys.revoked_token(jti), True, ttl=ttl_seconds)

    async def is_revoked(self, jti: str) -> bool:
        return await self._cache.exists(self._keys.revoked_token(jti))


class RedisRevocationRegistry:
    """Revocation registry in Redis.

    Redis errors propagate: a registry that cannot be read must not report a
    token as valid.
    """

    def __init__(self, redis_client: Redis, keys: TenantCacheKeys) -> None:
        self._redis = redis_client
        self._keys = keys

    async def revoke(self, jti: str, ttl_seconds: int) -> None:
        await self._redis.set(self._keys.revoked_token(jti), "1", ex=ttl_seconds)

    async def is_revoked(self, jti: str) -> bool:
        return bool(await self._redis.exists(self._keys.revoked_token(jti)))
