"""Authentication queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetLoginAttempts:
    """Read the failed login counter of a user.

    Attributes:
        identifier: Email address or username.
        tenant_id: Tenant scope.
    """

    identifier: str
    tenant_id: str
