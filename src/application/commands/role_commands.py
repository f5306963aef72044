"""Role commands (CQRS write operations).

Every command carries the acting admin so notifications can name who made
the change.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateRole:
    """Create a role in a tenant.

    Attributes:
        tenant_id: Tenant the role belongs to.
        name: Display name (1-100 characters, unique per tenant).
        code: Machine code matching ^[A-Z][A-Z0-9_]{1,49}$ (unique per tenant).
        acting_admin_id: Admin creating the role.
        description: Optional free text.
        priority: Ordering hint.
        max_users: Capacity limit (None = unlimited).
        expires_at: When the role stops accepting assignments.
        is_system_role: Mark as permanent system role.
        is_default_role: Mark as permanent default role.
        parent_role_id: Parent in the role tree.
        permission_ids: Permissions granted by the role.

    Example:
        >>> command = CreateRole(
        ...     tenant_id="acme",
        ...     name="Billing admin",
        ...     code="BILLING_ADMIN",
        ...     acting_admin_id=admin_id,
        ...     max_users=5,
        ... )
    """

    tenant_id: str
    name: str
    code: str
    acting_admin_id: UUID
    description: str | None = None
    priority: int = 0
    max_users: int | None = None
    expires_at: datetime | None = None
    is_system_role: bool = False
    is_default_role: bool = False
    parent_role_id: UUID | None = None
    permission_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class AssignUserToRole:
    """Assign a user to a role.

    Attributes:
        role_id: Role to assign to.
        user_id: User being assigned.
        tenant_id: Tenant scope.
        acting_admin_id: Admin performing the assignment.
    """

    role_id: UUID
    user_id: UUID
    tenant_id: str
    acting_admin_id: UUID


@dataclass(frozen=True, kw_only=True)
class UnassignUserFromRole:
    """Remove a user from a role.

    Attributes:
        role_id: Role to remove the user from.
        user_id: User being removed.
        tenant_id: Tenant scope.
        acting_admin_id: Admin performing the removal.
    """

    role_id: UUID
    user_id: UUID
    tenant_id: str
    acting_admin_id: UUID


@dataclass(frozen=True, kw_only=True)
class DeleteRole:
    """Soft-delete a role.

    Attributes:
        role_id: Role to delete.
        tenant_id: Tenant scope.
        acting_admin_id: Admin performing the deletion.
    """

    role_id: UUID
    tenant_id: str
    acting_admin_id: UUID
