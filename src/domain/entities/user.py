"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Lockout:
    - login_attempts counts consecutive failed password checks
    - locked_until is set when the account is locked and cleared on unlock
    - A lock whose locked_until has passed is lifted lazily by the next
      authentication attempt (see AuthenticateUserHandler)

The password hashing algorithm is opaque to the entity: verify_password
delegates to whatever PasswordHashingProtocol implementation it is handed.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.enums import UserStatus

if TYPE_CHECKING:
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol


@dataclass(kw_only=True)
class User:
    """User aggregate with authentication business rules.

    Business Rules:
        - Only ACTIVE users can authenticate
        - login_attempts never drops below zero
        - login_attempts resets on successful login, explicit reset or unlock
        - locked_until is None unless a lock is in effect

    Attributes:
        id: Unique user identifier.
        tenant_id: Tenant the user belongs to.
        email: Normalised email address.
        username: Login name, unique per tenant.
        password_hash: Opaque password hash (never plaintext).
        status: Account status.
        login_attempts: Consecutive failed password checks.
        locked_until: When the current lock lifts (None if not locked).
        lock_reason: Why the account was locked.
        created_at: When the user was created.
        updated_at: When the user was last modified.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     tenant_id="acme",
        ...     email="user@example.com",
        ...     username="user",
        ...     password_hash="$2b$12$...",
        ...     status=UserStatus.ACTIVE,
        ... )
        >>> user.record_failed_login()
        1
        >>> user.is_locked()
        False
    """

    id: UUID
    tenant_id: str
    email: str
    username: str
    password_hash: str
    status: UserStatus = UserStatus.PENDING
    login_attempts: int = 0
    locked_until: datetime | None = None
    lock_reason: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if self.login_attempts < 0:
            raise ValueError("login_attempts must not be negative")

    def is_active(self) -> bool:
        """Check if the account status permits authentication."""
        return self.status == UserStatus.ACTIVE

    def is_locked(self, now: datetime | None = None) -> bool:
        """Check if a lock is currently in effect.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if locked_until is set and still in the future.
        """
        if self.locked_until is None:
            return False
        return (now or datetime.now(UTC)) < self.locked_until

    def has_expired_lock(self, now: datetime | None = None) -> bool:
        """Check if a lock was set but its locked_until has passed."""
        return self.locked_until is not None and not self.is_locked(now)

    def lock(self, reason: str, until: datetime) -> None:
        """Lock the account until the given time.

        Args:
            reason: Why the account is being locked.
            until: When the lock lifts.
        """
        self.locked_until = until
        self.lock_reason = reason
        self.updated_at = datetime.now(UTC)

    def unlock(self) -> None:
        """Lift the lock and start counting failed attempts from zero."""
        self.locked_until = None
        self.lock_reason = None
        self.login_attempts = 0
        self.updated_at = datetime.now(UTC)

    def record_failed_login(self) -> int:
        """Count one more failed password check.

        Returns:
            The updated number of consecutive failed attempts.
        """
        self.login_attempts += 1
        self.updated_at = datetime.now(UTC)
        return self.login_attempts

    def reset_login_attempts(self) -> None:
        """Clear the failed attempt counter and any lock."""
        self.login_attempts = 0
        self.locked_until = None
        self.lock_reason = None
        self.updated_at = datetime.now(UTC)

    def verify_password(
        self, password: str, password_service: "PasswordHashingProtocol"
    ) -> bool:
        """Check a plaintext password against the stored hash.

        Args:
            password: Plaintext password supplied at login.
            password_service: Hashing implementation that produced the hash.

        Returns:
            True if the password matches.
        """
        return password_service.verify_password(password, self.password_hash)
