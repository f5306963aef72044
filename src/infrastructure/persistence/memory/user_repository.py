"""In-memory UserRepository."""

from copy import deepcopy
from uuid import UUID

from src.domain.entities.user import User


class InMemoryUserRepository:
    """Dict-backed implementation of the UserRepository protocol.

    Example:
        >>> repo = InMemoryUserRepository()
        >>> await repo.save(user)
        >>> await repo.find_by_email("USER@example.com", user.tenant_id)
        User(...)
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[UUID, User] = {}
        for user in users or []:
            self._users[user.id] = deepcopy(user)

    async def find_by_id(self, user_id: UUID, tenant_id: str) -> User | None:
        user = self._users.get(user_id)
        if user is None or user.tenant_id != tenant_id:
            return None
        return deepcopy(user)

    async def find_by_email(self, email: str, tenant_id: str) -> User | None:
        wanted = email.lower()
        for user in self._users.values():
            if user.tenant_id == tenant_id and user.email.lower() == wanted:
                return deepcopy(user)
        return None

    async def find_by_username(self, username: str, tenant_id: str) -> User | None:
        for user in self._users.values():
            if user.tenant_id == tenant_id and user.username == username:
                return deepcopy(user)
        return None

    async def save(self, user: User) -> None:
        self._users[user.id] = deepcopy(user)
