"""Queries (CQRS read operations)."""

from src.application.queries.auth_queries import GetLoginAttempts
from src.application.queries.permission_queries import CheckPermissionAccess
from src.application.queries.role_queries import GetRole

__all__ = [
    "CheckPermissionAccess",
    "GetLoginAttempts",
    "GetRole",
]
