"""Infrastructure dependency factories.

Builders for core infrastructure services:
- Logging (structlog console adapter)
- Data cache (in-process TTL cache)
- Revocation cache (unbounded, always enabled)
- Redis client (shared revocation backend)

The create_* functions build fresh instances from explicit settings;
get_logger memoizes the process-wide logger.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import Settings, get_settings

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.cache.cache_keys import TenantCacheKeys
    from src.infrastructure.cache.memory_cache import MemoryCache


# ============================================================================
# Builders (fresh instance per call)
# ============================================================================


def create_logger(settings: Settings) -> "LoggerProtocol":
    """Console logger (JSON outside development unless overridden)."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.use_json_logs,
        level=settings.log_level,
        app_name=settings.app_name,
        environment=settings.environment.value,
    )


def create_cache(
    settings: Settings, logger: "LoggerProtocol | None" = None
) -> "MemoryCache":
    """Data cache (role and permission snapshots) sized from settings.

    Args:
        settings: Source of size, TTL and sweep interval.
        logger: Optional logger for sweep/eviction diagnostics.
    """
    from src.infrastructure.cache.memory_cache import MemoryCache

    return MemoryCache(
        enabled=settings.cache_enabled,
        max_size=settings.cache_max_size,
        default_ttl_seconds=settings.cache_default_ttl_seconds,
        cleanup_interval_seconds=settings.cache_cleanup_interval_seconds,
        logger=logger,
    )


def create_revocation_cache(
    settings: Settings, logger: "LoggerProtocol | None" = None
) -> "MemoryCache":
    """Backing store for InMemoryRevocationRegistry.

    Always enabled and without a size bound: a revoked token id may only
    leave by expiring together with its token. CACHE_ENABLED and
    CACHE_MAX_SIZE do not apply.
    """
    from src.infrastructure.cache.memory_cache import MemoryCache

    return MemoryCache(
        enabled=True,
        max_size=None,
        default_ttl_seconds=settings.cache_default_ttl_seconds,
        cleanup_interval_seconds=settings.cache_cleanup_interval_seconds,
        logger=logger,
    )


def create_cache_keys(settings: Settings) -> "TenantCacheKeys":
    from src.infrastructure.cache.cache_keys import TenantCacheKeys

    return TenantCacheKeys(prefix=settings.cache_key_prefix)


def create_redis_client(settings: Settings) -> "Redis":
    """Redis client with a pooled connection.

    Raises:
        ValueError: If redis_url is not configured.
    """
    from redis.asyncio import ConnectionPool, Redis

    if not settings.redis_url:
        raise ValueError("REDIS_URL is required when REVOCATION_BACKEND=redis")

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Usage:
        logger = get_logger()
        logger.info("Role created", role_id=str(role.id))
    """
    return create_logger(get_settings())

