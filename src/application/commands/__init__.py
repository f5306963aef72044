"""Commands (CQRS write operations)."""

from src.application.commands.auth_commands import AuthenticateUser, ResetLoginAttempts
from src.application.commands.role_commands import (
    AssignUserToRole,
    CreateRole,
    DeleteRole,
    UnassignUserFromRole,
)

__all__ = [
    "AssignUserToRole",
    "AuthenticateUser",
    "CreateRole",
    "DeleteRole",
    "ResetLoginAttempts",
    "UnassignUserFromRole",
]
