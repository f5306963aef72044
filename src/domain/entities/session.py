"""Session domain entity for multi-device session management.

Pure business logic, no framework dependencies.

A session is a stateful record of an authenticated device. It is independent
of the bearer tokens issued alongside it: rotating an access token does not
touch the session, and revoking a session is the unit of "log out
everywhere".
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class Session:
    """Session domain entity with device tracking.

    Business Rules:
        - Session is active if not revoked and not expired
        - Revocation is immediate, permanent and idempotent
        - Revoking one session never affects another session of the same user

    Attributes:
        id: Unique session identifier.
        user_id: User who owns this session.
        tenant_id: Tenant the session belongs to.
        user_agent: Full user agent string.
        ip_address: Client IP at session creation.
        device_type: "mobile", "tablet", "desktop" or "other".
        device_info: Human-readable device description ("Chrome on Mac OS X").
        issued_at: When the session was created.
        expires_at: When the session expires.
        last_activity_at: Last recorded activity.
        is_revoked: Whether the session was revoked.
        revoked_at: When the session was revoked.
        revoked_reason: Why the session was revoked.

    Example:
        >>> session = Session(
        ...     id=uuid7(),
        ...     user_id=uuid7(),
        ...     tenant_id="acme",
        ...     expires_at=datetime.now(UTC) + timedelta(days=30),
        ... )
        >>> session.is_active()
        True
        >>> session.revoke("user_logout")
        True
        >>> session.is_active()
        False
    """

    id: UUID
    user_id: UUID
    tenant_id: str

    # Device Information
    user_agent: str | None = None
    ip_address: str | None = None
    device_type: str | None = None
    device_info: str | None = None

    # Timestamps
    issued_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime | None = None
    last_activity_at: datetime | None = None

    # Revocation
    is_revoked: bool = False
    revoked_at: datetime | None = None
    revoked_reason: str | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the session has passed its expiry."""
        if self.expires_at is None:
            return False
        return (now or datetime.now(UTC)) >= self.expires_at

    def is_active(self, now: datetime | None = None) -> bool:
        """Check if session is active (not revoked, not expired)."""
        return not self.is_revoked and not self.is_expired(now)

    def belongs_to(self, user_id: UUID, tenant_id: str) -> bool:
        """Check ownership by user and tenant."""
        return self.user_id == user_id and self.tenant_id == tenant_id

    def revoke(self, reason: str) -> bool:
        """Revoke this session.

        Args:
            reason: Why the session is being revoked ("user_logout",
                "logout_all", "admin_action", ...).

        Returns:
            True if the session changed state, False if it was already revoked.
        """
        if self.is_revoked:
            return False
        self.is_revoked = True
        self.revoked_at = datetime.now(UTC)
        self.revoked_reason = reason
        return True

    def touch(self, ip_address: str | None = None) -> None:
        """Record activity, optionally from a new IP address."""
        self.last_activity_at = datetime.now(UTC)
        if ip_address:
            self.ip_address = ip_address
