"""In-memory SessionRepository."""

from copy import deepcopy
from uuid import UUID

from src.domain.entities.session import Session


class InMemorySessionRepository:
    """Dict-backed implementation of the SessionRepository protocol."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, Session] = {}

    async def find_by_id(self, session_id: UUID) -> Session | None:
        session = self._sessions.get(session_id)
        return deepcopy(session) if session is not None else None

    async def find_by_user(
        self,
        user_id: UUID,
        tenant_id: str,
        active_only: bool = True,
    ) -> list[Session]:
        sessions = [
            deepcopy(s)
            for s in self._sessions.values()
            if s.belongs_to(user_id, tenant_id) and (not active_only or s.is_active())
        ]
        return sorted(sessions, key=lambda s: s.issued_at, reverse=True)

    async def save(self, session: Session) -> None:
        self._sessions[session.id] = deepcopy(session)
