"""Check permission access handler.

Flow:
1. Load the permission through the permission cache (read-through)
2. Inactive permission -> access denied
3. Compile the permission's conditions into a predicate tree
4. Evaluate the tree against the record

A permission without conditions grants access to every record.
"""

from src.application.queries.permission_queries import CheckPermissionAccess
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.permission import Permission
from src.domain.protocols import (
    LoggerProtocol,
    PermissionCacheProtocol,
    PermissionRepository,
)
from src.domain.services import PredicateEvaluator


class CheckPermissionAccessHandler:
    """Handler for CheckPermissionAccess query."""

    def __init__(
        self,
        permission_repo: PermissionRepository,
        permission_cache: PermissionCacheProtocol,
        logger: LoggerProtocol,
        evaluator: PredicateEvaluator | None = None,
    ) -> None:
        self._permission_repo = permission_repo
        self._permission_cache = permission_cache
        self._logger = logger
        self._evaluator = evaluator or PredicateEvaluator()

    async def handle(self, query: CheckPermissionAccess) -> Result[bool, NotFoundError]:
        """Decide access.

        Returns:
            Success(True) if the permission is active and the record
                satisfies its conditions, Success(False) otherwise.
            Failure(NotFoundError) if the permission does not exist.
        """
        permission = await self._load(query)
        if permission is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PERMISSION_NOT_FOUND,
                    message="Permission not found",
                    resource_type="Permission",
                    resource_id=str(query.permission_id),
                )
            )

        if not permission.is_active():
            self._logger.debug(
                "Access denied: permission inactive",
                permission_id=str(permission.id),
                status=permission.status.value,
            )
            return Success(value=False)

        allowed = self._evaluator.matches(permission.to_query_predicate(), query.record)
        return Success(value=allowed)

    async def _load(self, query: CheckPermissionAccess) -> Permission | None:
        permission = await self._permission_cache.get(
            query.tenant_id, query.permission_id
        )
        if permission is not None:
            return permission

        permission = await self._permission_repo.find_by_id(
            query.permission_id, query.tenant_id
        )
        if permission is not None:
            await self._permission_cache.set(permission)
        return permission
