"""Role domain entity.

A role groups users under a tenant-unique code. Roles form a tree through
weak id references (parent_role_id / child_role_ids); a role never holds the
other Role objects themselves.

Business Rules:
    - A user id appears at most once in user_ids
    - len(user_ids) <= max_users when max_users is set
    - Only ACTIVE, unexpired roles accept new users
    - System and default roles are permanent
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import RoleStatus


@dataclass(kw_only=True)
class Role:
    """Role aggregate owning its user assignment list.

    Attributes:
        id: Unique role identifier.
        tenant_id: Tenant the role belongs to.
        name: Display name, unique per tenant.
        code: Machine code, unique per tenant (e.g. "BILLING_ADMIN").
        description: Optional free text.
        status: Lifecycle status.
        priority: Ordering hint, higher wins.
        user_ids: Assigned users in assignment order.
        permission_ids: Granted permissions.
        max_users: Capacity limit (None = unlimited).
        expires_at: When the role stops accepting assignments.
        is_system_role: System roles cannot be deleted.
        is_default_role: Default roles cannot be deleted.
        parent_role_id: Parent in the role tree.
        child_role_ids: Children in the role tree.
        created_by: Admin who created the role.
        created_at: Creation time.
        updated_at: Last modification time.
        deleted_at: Soft-deletion time.
    """

    id: UUID
    tenant_id: str
    name: str
    code: str
    description: str | None = None
    status: RoleStatus = RoleStatus.ACTIVE
    priority: int = 0
    user_ids: list[UUID] = field(default_factory=list)
    permission_ids: list[UUID] = field(default_factory=list)
    max_users: int | None = None
    expires_at: datetime | None = None
    is_system_role: bool = False
    is_default_role: bool = False
    parent_role_id: UUID | None = None
    child_role_ids: list[UUID] = field(default_factory=list)
    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        if len(set(self.user_ids)) != len(self.user_ids):
            raise ValueError("user_ids must not contain duplicates")
        if self.max_users is not None:
            if self.max_users < 0:
                raise ValueError("max_users must not be negative")
            if len(self.user_ids) > self.max_users:
                raise ValueError("user_ids exceeds max_users")

    def can_assign_users(self) -> bool:
        """Check if the status accepts new assignments."""
        return self.status.allows_assignment()

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at < (now or datetime.now(UTC))

    def is_deleted(self) -> bool:
        return self.status == RoleStatus.DELETED

    def has_user(self, user_id: UUID) -> bool:
        return user_id in self.user_ids

    def is_at_capacity(self) -> bool:
        return self.max_users is not None and len(self.user_ids) >= self.max_users

    def has_children(self) -> bool:
        return bool(self.child_role_ids)

    @property
    def user_count(self) -> int:
        return len(self.user_ids)

    def add_user(self, user_id: UUID) -> None:
        """Append a user.

        Callers check has_user/is_at_capacity first; this only guards the
        invariants.

        Raises:
            ValueError: If the user is already assigned or the role is full.
        """
        if self.has_user(user_id):
            raise ValueError(f"User {user_id} is already assigned")
        if self.is_at_capacity():
            raise ValueError("Role has reached its user limit")
        self.user_ids.append(user_id)
        self.updated_at = datetime.now(UTC)

    def remove_user(self, user_id: UUID) -> bool:
        """Remove a user. Returns False if the user was not assigned."""
        if user_id not in self.user_ids:
            return False
        self.user_ids.remove(user_id)
        self.updated_at = datetime.now(UTC)
        return True

    def add_child(self, child_id: UUID) -> None:
        if child_id not in self.child_role_ids:
            self.child_role_ids.append(child_id)
            self.updated_at = datetime.now(UTC)

    def remove_child(self, child_id: UUID) -> bool:
        if child_id not in self.child_role_ids:
            return False
        self.child_role_ids.remove(child_id)
        self.updated_at = datetime.now(UTC)
        return True

    def mark_deleted(self) -> None:
        """Soft-delete the role."""
        now = datetime.now(UTC)
        self.status = RoleStatus.DELETED
        self.deleted_at = now
        self.updated_at = now
