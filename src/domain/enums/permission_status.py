"""Permission lifecycle status."""

from enum import Enum


class PermissionStatus(str, Enum):
    """Lifecycle status of a permission.

    Transitions:
        INACTIVE/SUSPENDED -> ACTIVE (activate)
        ACTIVE -> SUSPENDED (suspend)
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    EXPIRED = "expired"

    def can_be_activated(self) -> bool:
        return self in (PermissionStatus.INACTIVE, PermissionStatus.SUSPENDED)

    def can_be_suspended(self) -> bool:
        return self is PermissionStatus.ACTIVE
