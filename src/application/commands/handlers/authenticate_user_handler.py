"""Authenticate user handler (Authentication Guard).

Single responsibility: Verify user credentials and drive the per-account
lockout state machine. Does NOT create sessions or generate tokens.

States:
    Unlocked(attempts) -> Locked(until) when a failed check brings attempts
    to max_login_attempts. Locked(until) -> Unlocked lazily, on the first
    attempt made after `until`.

Flow:
1. Resolve identifier (email or username) and load user within tenant
2. Unknown user -> generic credential failure
3. Account not ACTIVE -> ForbiddenError
4. Locked and not expired -> LockedError carrying the unlock time
5. Locked and expired -> unlock, continue
6. Attempts already at threshold -> lock, persist, LockedError
7. Wrong password -> increment, lock at threshold, persist, credential failure
8. Correct password -> reset attempts, persist, Success(AuthenticatedUser)

Every outcome is a Result. Exceptions from collaborators are logged and
turned into a generic AuthenticationError.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime, timedelta

from src.application.commands.auth_commands import AuthenticateUser
from src.application.dtos.auth_dtos import AuthenticatedUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, ForbiddenError, LockedError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import LoggerProtocol, PasswordHashingProtocol, UserRepository
from src.domain.value_objects import LoginIdentifier


class AuthenticateUserHandler:
    """Handler for user authentication command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User entity, protocols)
    - Infrastructure layer (repositories via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
        max_login_attempts: int = 5,
        lock_duration_minutes: int = 30,
    ) -> None:
        """Initialize authentication handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password verification capability.
            logger: Structured logger.
            max_login_attempts: Failed attempts that trigger a lock.
            lock_duration_minutes: How long a lock lasts.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger
        self._max_login_attempts = max_login_attempts
        self._lock_duration = timedelta(minutes=lock_duration_minutes)

    async def handle(
        self, cmd: AuthenticateUser
    ) -> Result[AuthenticatedUser, DomainError]:
        """Handle user authentication command.

        Args:
            cmd: AuthenticateUser command (identifier, password, tenant).

        Returns:
            Success(AuthenticatedUser) on successful authentication.
            Failure(AuthenticationError) for unknown users and wrong passwords
                (same message), with login_attempts set for wrong passwords.
            Failure(ForbiddenError) if the account is not active.
            Failure(LockedError) if the account is locked.

        Side Effects:
            - Persists the user after every state change.
        """
        try:
            return await self._authenticate(cmd)
        except Exception as e:
            self._logger.error(
                "Authentication failed unexpectedly",
                error=e,
                tenant_id=cmd.tenant_id,
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=AuthErrorMessage.AUTHENTICATION_FAILED,
                )
            )

    async def _authenticate(
        self, cmd: AuthenticateUser
    ) -> Result[AuthenticatedUser, DomainError]:
        # Step 1: Resolve identifier and load user
        user = await self._find_user(cmd.identifier, cmd.tenant_id)

        # Step 2: Unknown user looks exactly like a wrong password
        if user is None:
            self._logger.info("Login failed: unknown identifier", tenant_id=cmd.tenant_id)
            return Failure(error=self._invalid_credentials())

        log = self._logger.bind(user_id=str(user.id), tenant_id=cmd.tenant_id)

        # Step 3: Check account active
        if not user.is_active():
            log.info("Login rejected: account inactive", status=user.status.value)
            return Failure(
                error=ForbiddenError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=AuthErrorMessage.ACCOUNT_INACTIVE,
                    resource_type="User",
                )
            )

        now = datetime.now(UTC)

        # Step 4: Locked and not expired, no attempt is counted
        if user.is_locked(now) and user.locked_until is not None:
            log.info("Login rejected: account locked")
            return Failure(error=self._locked(user.locked_until))

        # Step 5: Lock expired, lift it before going on
        if user.has_expired_lock(now):
            user.unlock()
            log.info("Account unlocked after lock expiry")

        # Step 6: Counter already at threshold
        if user.login_attempts >= self._max_login_attempts:
            locked_until = self._lock(user, now)
            await self._user_repo.save(user)
            log.warning("Account locked", login_attempts=user.login_attempts)
            return Failure(error=self._locked(locked_until))

        # Step 7: Verify password
        if not user.verify_password(cmd.password, self._password_service):
            attempts = user.record_failed_login()
            if attempts >= self._max_login_attempts:
                self._lock(user, now)
                log.warning("Account locked", login_attempts=attempts)
            await self._user_repo.save(user)
            log.info("Login failed: wrong password", login_attempts=attempts)
            return Failure(error=self._invalid_credentials(login_attempts=attempts))

        # Step 8: Reset counter on success
        user.reset_login_attempts()
        await self._user_repo.save(user)
        log.info("Login succeeded")

        return Success(
            value=AuthenticatedUser(
                user_id=user.id,
                tenant_id=user.tenant_id,
                email=user.email,
                username=user.username,
            )
        )

    async def _find_user(self, identifier: str, tenant_id: str) -> User | None:
        try:
            login = LoginIdentifier.parse(identifier)
        except ValueError:
            return None
        if login.is_email:
            return await self._user_repo.find_by_email(login.value, tenant_id)
        return await self._user_repo.find_by_username(login.value, tenant_id)

    def _lock(self, user: User, now: datetime) -> datetime:
        until = now + self._lock_duration
        user.lock(
            reason=AuthErrorMessage.ACCOUNT_LOCKED_TOO_MANY_ATTEMPTS, until=until
        )
        return until

    @staticmethod
    def _locked(locked_until: datetime) -> LockedError:
        return LockedError(
            code=ErrorCode.ACCOUNT_LOCKED,
            message=AuthErrorMessage.ACCOUNT_LOCKED_UNTIL.format(
                locked_until=locked_until.isoformat()
            ),
            locked_until=locked_until,
        )

    @staticmethod
    def _invalid_credentials(login_attempts: int | None = None) -> AuthenticationError:
        return AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=AuthErrorMessage.INVALID_CREDENTIALS,
            login_attempts=login_attempts,
        )
