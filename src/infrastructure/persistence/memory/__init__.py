"""In-memory repositories.

Dict-backed adapters of the repository ports for composition without a
database engine (local runs, tests). Entities are deep-copied on the way in
and out, so a caller's changes only become visible after save(), as with a
real store.
"""

from src.infrastructure.persistence.memory.permission_repository import (
    InMemoryPermissionRepository,
)
from src.infrastructure.persistence.memory.role_repository import InMemoryRoleRepository
from src.infrastructure.persistence.memory.session_repository import (
    InMemorySessionRepository,
)
from src.infrastructure.persistence.memory.user_repository import InMemoryUserRepository

__all__ = [
    "InMemoryPermissionRepository",
    "InMemoryRoleRepository",
    "InMemorySessionRepository",
    "InMemoryUserRepository",
]
