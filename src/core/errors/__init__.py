"""Core errors package.

Usage:
    from src.core.errors import DomainError, ValidationError, NotFoundError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    CapacityError,
    ConflictError,
    ExpiredError,
    ForbiddenError,
    LockedError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ForbiddenError",
    "CapacityError",
    "ExpiredError",
    "LockedError",
    "AuthenticationError",
]
