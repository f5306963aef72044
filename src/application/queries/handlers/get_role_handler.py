"""Get role handler (read-through role cache)."""

from src.application.queries.role_queries import GetRole
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.errors import RoleErrorMessage
from src.domain.protocols import RoleCacheProtocol, RoleRepository


class GetRoleHandler:
    """Handler for GetRole query.

    Cache hits return the snapshot without touching the repository. Misses
    load from the repository and populate the cache. Soft-deleted roles are
    reported as not found.
    """

    def __init__(self, role_repo: RoleRepository, role_cache: RoleCacheProtocol) -> None:
        self._role_repo = role_repo
        self._role_cache = role_cache

    async def handle(self, query: GetRole) -> Result[Role, NotFoundError]:
        role = await self._role_cache.get(query.tenant_id, query.role_id)
        if role is None:
            role = await self._role_repo.find_by_id(query.role_id, query.tenant_id)
            if role is not None and not role.is_deleted():
                await self._role_cache.set(role)

        if role is None or role.is_deleted():
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ROLE_NOT_FOUND,
                    message=RoleErrorMessage.ROLE_NOT_FOUND,
                    resource_type="Role",
                    resource_id=str(query.role_id),
                )
            )
        return Success(value=role)
