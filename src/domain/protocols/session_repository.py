"""SessionRepository protocol for session persistence.

Port (interface) for hexagonal architecture. The Token/Session Service is
the only writer.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.session import Session


class SessionRepository(Protocol):
    """Session repository protocol (port).

    Methods:
        find_by_id: Retrieve a session by ID
        find_by_user: List a user's sessions in a tenant
        save: Insert or update a session
    """

    async def find_by_id(self, session_id: UUID) -> Session | None:
        """Find session by ID.

        Ownership (user and tenant) is checked by the caller.
        """
        ...

    async def find_by_user(
        self,
        user_id: UUID,
        tenant_id: str,
        active_only: bool = True,
    ) -> list[Session]:
        """List sessions of a user, newest first.

        Args:
            user_id: Owner of the sessions.
            tenant_id: Tenant scope.
            active_only: Exclude revoked and expired sessions.
        """
        ...

    async def save(self, session: Session) -> None:
        """Insert or update a session."""
        ...
