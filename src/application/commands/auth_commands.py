"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class AuthenticateUser:
    """Authenticate user credentials within a tenant.

    Single responsibility: Verify credentials and drive the lockout state
    machine. Does NOT create sessions or generate tokens.

    Attributes:
        identifier: Email address (contains "@") or username.
        password: Plaintext password.
        tenant_id: Tenant the user belongs to.

    Example:
        >>> command = AuthenticateUser(
        ...     identifier="user@example.com",
        ...     password="SecurePass123!",
        ...     tenant_id="acme",
        ... )
        >>> result = await handler.handle(command)
    """

    identifier: str
    password: str
    tenant_id: str


@dataclass(frozen=True, kw_only=True)
class ResetLoginAttempts:
    """Clear a user's failed login counter and any lock (admin action).

    Attributes:
        user_id: User whose counter is reset.
        tenant_id: Tenant the user belongs to.
    """

    user_id: UUID
    tenant_id: str
