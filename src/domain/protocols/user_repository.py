"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Every lookup is scoped to a tenant: the same email may exist in two
    tenants as two unrelated users.
    """

    async def find_by_id(self, user_id: UUID, tenant_id: str) -> User | None:
        """Find user by ID within a tenant.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str, tenant_id: str) -> User | None:
        """Find user by email address within a tenant.

        Email comparison should be case-insensitive.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str, tenant_id: str) -> User | None:
        """Find user by username within a tenant.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Insert or update a user.

        Last writer wins; no optimistic concurrency check is made.
        """
        ...
