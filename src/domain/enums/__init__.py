"""Domain enums package.

Usage:
    from src.domain.enums import PermissionType, RoleStatus, UserStatus
"""

from src.domain.enums.condition_operator import ConditionOperator, LogicalOperator
from src.domain.enums.permission_status import PermissionStatus
from src.domain.enums.permission_type import PermissionType
from src.domain.enums.role_status import RoleStatus
from src.domain.enums.token_type import TokenType
from src.domain.enums.user_status import UserStatus

__all__ = [
    "ConditionOperator",
    "LogicalOperator",
    "PermissionStatus",
    "PermissionType",
    "RoleStatus",
    "TokenType",
    "UserStatus",
]
