"""Domain errors package.

Message constants used inside core error kinds.

Usage:
    from src.domain.errors import AuthErrorMessage, RoleErrorMessage
"""

from src.domain.errors.authentication_error import AuthErrorMessage
from src.domain.errors.role_error import RoleErrorMessage

__all__ = [
    "AuthErrorMessage",
    "RoleErrorMessage",
]
