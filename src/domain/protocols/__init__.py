"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.permission_cache_protocol import PermissionCacheProtocol
from src.domain.protocols.role_cache_protocol import RoleCacheProtocol
from src.domain.protocols.role_notification_protocol import RoleNotificationProtocol
from src.domain.protocols.session_enricher_protocol import (
    DeviceEnricher,
    DeviceEnrichmentResult,
)
from src.domain.protocols.token_revocation_protocol import TokenRevocationProtocol
from src.domain.protocols.token_signing_protocol import TokenSigningProtocol

# Repository protocols
from src.domain.protocols.permission_repository import PermissionRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.session_repository import SessionRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "CacheProtocol",
    "DeviceEnricher",
    "DeviceEnrichmentResult",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "PermissionCacheProtocol",
    "RoleCacheProtocol",
    "RoleNotificationProtocol",
    "TokenRevocationProtocol",
    "TokenSigningProtocol",
    # Repository protocols
    "PermissionRepository",
    "RoleRepository",
    "SessionRepository",
    "UserRepository",
]
