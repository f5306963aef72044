"""Result types for railway-oriented programming.

Operations that can fail for business reasons return a Result instead of
raising. Callers branch on the variant explicitly, which keeps rejected logins,
capacity violations and malformed conditions on the same code path as
successes.

Usage:
    def find_role(role_id: UUID) -> Result[Role, NotFoundError]:
        role = roles.get(role_id)
        if role is None:
            return Failure(error=NotFoundError(...))
        return Success(value=role)

    match find_role(role_id):
        case Success(value=role):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
