"""Identity core composition root.

Wires the Authentication Guard, Token/Session Service, role handlers and
access checker from explicit repositories. No reflection-based DI: every
dependency is a constructor argument.

Usage:
    core = build_identity_core(
        user_repo=user_repo,
        role_repo=role_repo,
        permission_repo=permission_repo,
        session_repo=session_repo,
    )
    await core.start()
    try:
        result = await core.authenticate_user.handle(
            AuthenticateUser(identifier="a@example.com", password="...", tenant_id="acme")
        )
    finally:
        await core.shutdown()
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.application.commands.handlers.assign_user_to_role_handler import (
    AssignUserToRoleHandler,
)
from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
)
from src.application.commands.handlers.create_role_handler import CreateRoleHandler
from src.application.commands.handlers.delete_role_handler import DeleteRoleHandler
from src.application.commands.handlers.reset_login_attempts_handler import (
    ResetLoginAttemptsHandler,
)
from src.application.commands.handlers.unassign_user_from_role_handler import (
    UnassignUserFromRoleHandler,
)
from src.application.queries.handlers.check_permission_access_handler import (
    CheckPermissionAccessHandler,
)
from src.application.queries.handlers.get_login_attempts_handler import (
    GetLoginAttemptsHandler,
)
from src.application.queries.handlers.get_role_handler import GetRoleHandler
from src.application.services.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from src.application.services.token_session_service import TokenSessionService
from src.core.config import Settings, get_settings
from src.core.container.infrastructure import (
    create_cache,
    create_cache_keys,
    create_logger,
    create_redis_client,
    create_revocation_cache,
    get_logger,
)
from src.infrastructure.cache.memory_cache import MemoryCache
from src.infrastructure.cache.permission_cache import PermissionCache
from src.infrastructure.cache.role_cache import RoleCache
from src.infrastructure.enrichers.device_enricher import UserAgentDeviceEnricher
from src.infrastructure.notifications.logging_role_notifier import LoggingRoleNotifier
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.revocation_registry import (
    InMemoryRevocationRegistry,
    RedisRevocationRegistry,
)

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols import (
        LoggerProtocol,
        PasswordHashingProtocol,
        PermissionRepository,
        RoleNotificationProtocol,
        RoleRepository,
        SessionRepository,
        TokenRevocationProtocol,
        UserRepository,
    )


@dataclass(kw_only=True)
class IdentityCore:
    """Wired handlers plus the resources that need explicit start/stop.

    Attributes:
        authenticate_user: Authentication Guard.
        reset_login_attempts: Admin reset of the lockout counter.
        get_login_attempts: Read of the lockout counter.
        tokens: Token/Session Service.
        create_role / assign_user_to_role / unassign_user_from_role /
        delete_role: Role Assignment Validator operations.
        get_role: Cached role read.
        check_permission_access: Condition evaluation against a record.
        cache: Shared data cache (role and permission snapshots).
        logger: Root logger.
    """

    authenticate_user: AuthenticateUserHandler
    reset_login_attempts: ResetLoginAttemptsHandler
    get_login_attempts: GetLoginAttemptsHandler
    tokens: TokenSessionService
    create_role: CreateRoleHandler
    assign_user_to_role: AssignUserToRoleHandler
    unassign_user_from_role: UnassignUserFromRoleHandler
    delete_role: DeleteRoleHandler
    get_role: GetRoleHandler
    check_permission_access: CheckPermissionAccessHandler
    cache: MemoryCache
    logger: "LoggerProtocol"
    revocation_cache: MemoryCache | None = None
    redis_client: "Redis | None" = None
    _started: bool = field(default=False, init=False, repr=False)

    async def start(self) -> None:
        """Start background cache sweeps on the running loop (idempotent)."""
        self.cache.start()
        if self.revocation_cache is not None:
            self.revocation_cache.start()
        if not self._started:
            self._started = True
            self.logger.info("Identity core started")

    async def shutdown(self) -> None:
        """Cancel background work and release connections."""
        await self.cache.close()
        if self.revocation_cache is not None:
            await self.revocation_cache.close()
        if self.redis_client is not None:
            await self.redis_client.aclose()
        if self._started:
            self._started = False
            self.logger.info("Identity core stopped")


def build_identity_core(
    *,
    user_repo: "UserRepository",
    role_repo: "RoleRepository",
    permission_repo: "PermissionRepository",
    session_repo: "SessionRepository",
    notifier: "RoleNotificationProtocol | None" = None,
    settings: Settings | None = None,
    logger: "LoggerProtocol | None" = None,
    password_service: "PasswordHashingProtocol | None" = None,
    cache: MemoryCache | None = None,
) -> IdentityCore:
    """Build an IdentityCore.

    Args:
        user_repo: User persistence.
        role_repo: Role persistence.
        permission_repo: Permission persistence.
        session_repo: Session persistence.
        notifier: Role notifications (defaults to LoggingRoleNotifier).
        settings: Configuration (defaults to get_settings()).
        logger: Root logger (defaults to a console adapter built from the
            given settings, or the process-wide get_logger() singleton when
            settings are not given).
        password_service: Password hashing (defaults to bcrypt).
        cache: Shared data cache (defaults to a MemoryCache from settings).

    Returns:
        IdentityCore; call start() inside the event loop before use.
    """
    if settings is None:
        settings = get_settings()
        logger = logger or get_logger()
    else:
        logger = logger or create_logger(settings)
    cache = cache or create_cache(settings, logger)
    keys = create_cache_keys(settings)
    password_service = password_service or BcryptPasswordService(
        cost_factor=settings.bcrypt_rounds
    )

    revocation_cache: MemoryCache | None = None
    redis_client: "Redis | None" = None
    revocations: "TokenRevocationProtocol"
    if settings.revocation_backend == "redis":
        redis_client = create_redis_client(settings)
        revocations = RedisRevocationRegistry(redis_client, keys)
    else:
        revocation_cache = create_revocation_cache(settings, logger)
        revocations = InMemoryRevocationRegistry(revocation_cache, keys)

    role_cache = RoleCache(cache, keys, logger, ttl_seconds=settings.role_cache_ttl_seconds)
    permission_cache = PermissionCache(
        cache, keys, logger, ttl_seconds=settings.permission_cache_ttl_seconds
    )
    notifications = RoleNotificationDispatcher(
        notifier or LoggingRoleNotifier(logger), logger
    )

    return IdentityCore(
        authenticate_user=AuthenticateUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            logger=logger,
            max_login_attempts=settings.max_login_attempts,
            lock_duration_minutes=settings.lock_duration_minutes,
        ),
        reset_login_attempts=ResetLoginAttemptsHandler(user_repo, logger),
        get_login_attempts=GetLoginAttemptsHandler(user_repo),
        tokens=TokenSessionService(
            signer=JWTService(
                secret_key=settings.secret_key, algorithm=settings.jwt_algorithm
            ),
            revocations=revocations,
            session_repo=session_repo,
            device_enricher=UserAgentDeviceEnricher(logger),
            logger=logger,
            access_token_expire_minutes=settings.access_token_expire_minutes,
            refresh_token_expire_days=settings.refresh_token_expire_days,
            session_expire_days=settings.session_expire_days,
        ),
        create_role=CreateRoleHandler(role_repo, role_cache, notifications, logger),
        assign_user_to_role=AssignUserToRoleHandler(
            role_repo, role_cache, notifications, logger
        ),
        unassign_user_from_role=UnassignUserFromRoleHandler(
            role_repo, role_cache, notifications, logger
        ),
        delete_role=DeleteRoleHandler(role_repo, role_cache, notifications, logger),
        get_role=GetRoleHandler(role_repo, role_cache),
        check_permission_access=CheckPermissionAccessHandler(
            permission_repo, permission_cache, logger
        ),
        cache=cache,
        logger=logger,
        revocation_cache=revocation_cache,
        redis_client=redis_client,
    )
