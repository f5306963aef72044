"""User account status.

Only ACTIVE accounts may authenticate. Lockout is tracked separately through
User.locked_until, so a locked account is still ACTIVE.
"""

from enum import Enum


class UserStatus(str, Enum):
    """Lifecycle status of a user account."""

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DELETED = "deleted"
