"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error kinds for business-rule failures
- Settings loaded from the environment

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    CapacityError,
    ConflictError,
    DomainError,
    ExpiredError,
    ForbiddenError,
    LockedError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "CapacityError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "ExpiredError",
    "Failure",
    "ForbiddenError",
    "LockedError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
