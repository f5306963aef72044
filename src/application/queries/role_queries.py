"""Role queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetRole:
    """Fetch a role, served from the role cache when possible.

    Attributes:
        role_id: Role to fetch.
        tenant_id: Tenant scope.
    """

    role_id: UUID
    tenant_id: str
