"""Delete role handler.

Flow:
1. Load role (NotFound, also for an already deleted role)
2. System role -> Forbidden
3. Default role -> Forbidden
4. Users still assigned -> Conflict
5. Child roles present -> Conflict (tear hierarchies down bottom-up)
6. Soft-delete, persist, unlink from parent, evict caches, notify
"""

from src.application.commands.role_commands import DeleteRole
from src.application.services.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ForbiddenError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import RoleErrorMessage
from src.domain.protocols import LoggerProtocol, RoleCacheProtocol, RoleRepository


class DeleteRoleHandler:
    """Handler for DeleteRole command."""

    def __init__(
        self,
        role_repo: RoleRepository,
        role_cache: RoleCacheProtocol,
        notifications: RoleNotificationDispatcher,
        logger: LoggerProtocol,
    ) -> None:
        self._role_repo = role_repo
        self._role_cache = role_cache
        self._notifications = notifications
        self._logger = logger

    async def handle(self, cmd: DeleteRole) -> Result[None, DomainError]:
        """Soft-delete the role.

        Returns:
            Success(None) once deleted.
            Failure(NotFoundError | ForbiddenError | ConflictError) naming the
                violated rule.
        """
        role = await self._role_repo.find_by_id(cmd.role_id, cmd.tenant_id)
        if role is None or role.is_deleted():
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ROLE_NOT_FOUND,
                    message=RoleErrorMessage.ROLE_NOT_FOUND,
                    resource_type="Role",
                    resource_id=str(cmd.role_id),
                )
            )

        if role.is_system_role:
            return Failure(
                error=ForbiddenError(
                    code=ErrorCode.SYSTEM_ROLE_IMMUTABLE,
                    message=RoleErrorMessage.SYSTEM_ROLE,
                    resource_type="Role",
                )
            )

        if role.is_default_role:
            return Failure(
                error=ForbiddenError(
                    code=ErrorCode.DEFAULT_ROLE_IMMUTABLE,
                    message=RoleErrorMessage.DEFAULT_ROLE,
                    resource_type="Role",
                )
            )

        if role.user_ids:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ROLE_HAS_USERS,
                    message=RoleErrorMessage.HAS_USERS.format(count=role.user_count),
                    resource_type="Role",
                    conflicting_field="user_ids",
                )
            )

        if role.has_children():
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ROLE_HAS_CHILDREN,
                    message=RoleErrorMessage.HAS_CHILDREN,
                    resource_type="Role",
                    conflicting_field="child_role_ids",
                )
            )

        role.mark_deleted()
        await self._role_repo.save(role)

        if role.parent_role_id is not None:
            parent = await self._role_repo.find_by_id(role.parent_role_id, cmd.tenant_id)
            if parent is not None and parent.remove_child(role.id):
                await self._role_repo.save(parent)
                await self._role_cache.set(parent)

        await self._role_cache.delete(cmd.tenant_id, role.id)
        await self._role_cache.invalidate_lists(cmd.tenant_id)

        self._logger.info(
            "Role deleted",
            role_id=str(role.id),
            tenant_id=cmd.tenant_id,
            acting_admin_id=str(cmd.acting_admin_id),
        )
        await self._notifications.role_deleted(role, cmd.acting_admin_id)

        return Success(value=None)
