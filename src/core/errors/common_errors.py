"""Error kinds shared by every component of the identity core.

Callers render different user-facing messages per kind, so each rejection
reason maps to exactly one of these classes plus an ErrorCode.

Error Types:
- ValidationError: Malformed input the caller can correct
- NotFoundError: User, role, permission or session absent
- ConflictError: Duplicates and state conflicts
- ForbiddenError: Operation not allowed in the current state
- CapacityError: Role already holds its maximum number of users
- ExpiredError: Role, token or session past its expiry
- LockedError: Account locked, carries the unlock timestamp
- AuthenticationError: Bad credentials or unusable token

Usage:
    from src.core.errors import CapacityError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=CapacityError(
        code=ErrorCode.ROLE_CAPACITY_REACHED,
        message="Role has reached its maximum number of users",
        limit=role.max_users,
    ))
"""

from dataclasses import dataclass
from datetime import datetime

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Role, Session, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict (code, name, user_ids).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ForbiddenError(DomainError):
    """Operation forbidden by an immutability or state rule.

    Attributes:
        resource_type: Type of resource the rule protects.
    """

    resource_type: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CapacityError(DomainError):
    """Capacity limit reached.

    Attributes:
        limit: The configured maximum.
    """

    limit: int


@dataclass(frozen=True, slots=True, kw_only=True)
class ExpiredError(DomainError):
    """Resource past its expiry.

    Attributes:
        expired_at: When the resource expired, if known.
    """

    expired_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class LockedError(DomainError):
    """Account temporarily locked after repeated failed logins.

    Attributes:
        locked_until: When the lock lifts.
    """

    locked_until: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, unusable token).

    Unknown identifiers and wrong passwords produce the same message so the
    caller cannot tell which one happened.

    Attributes:
        login_attempts: Failed attempts recorded so far, when a password
            check actually ran.
    """

    login_attempts: int | None = None
