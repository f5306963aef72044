"""Role lifecycle status.

Status Rules:
    - ACTIVE: can be assigned to users
    - SUSPENDED: kept, but no new assignments
    - DELETED: soft-deleted, invisible to callers
"""

from enum import Enum


class RoleStatus(str, Enum):
    """Lifecycle status of a role."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    DELETED = "deleted"

    def allows_assignment(self) -> bool:
        """Check whether users can be assigned to a role in this status.

        Returns:
            True only for ACTIVE.
        """
        return self is RoleStatus.ACTIVE
