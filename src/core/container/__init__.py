"""Container module - Centralized dependency wiring.

    from src.core.container import build_identity_core, get_logger

The container is organized into modules:
- infrastructure: Core services (logging, caches, Redis client)
- identity: IdentityCore builder wiring handlers from repositories
"""

from src.core.container.identity import IdentityCore, build_identity_core
from src.core.container.infrastructure import (
    create_cache,
    create_cache_keys,
    create_logger,
    create_redis_client,
    create_revocation_cache,
    get_logger,
)

__all__ = [
    "IdentityCore",
    "build_identity_core",
    "create_cache",
    "create_cache_keys",
    "create_logger",
    "create_redis_client",
    "create_revocation_cache",
    "get_logger",
]
