"""Permission queries (CQRS read operations)."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CheckPermissionAccess:
    """Check whether a record satisfies a permission's conditions.

    Attributes:
        permission_id: Permission to check.
        tenant_id: Tenant scope.
        record: Attributes of the record being accessed.

    Example:
        >>> query = CheckPermissionAccess(
        ...     permission_id=permission_id,
        ...     tenant_id="acme",
        ...     record={"status": "active", "owner": {"id": "u-1"}},
        ... )
    """

    permission_id: UUID
    tenant_id: str
    record: Mapping[str, Any] = field(default_factory=dict)
