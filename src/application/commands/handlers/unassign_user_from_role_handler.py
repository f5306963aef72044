"""Unassign user from role handler."""

from src.application.commands.role_commands import UnassignUserFromRole
from src.application.services.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.errors import RoleErrorMessage
from src.domain.protocols import LoggerProtocol, RoleCacheProtocol, RoleRepository


class UnassignUserFromRoleHandler:
    """Handler for UnassignUserFromRole command.

    Removal is allowed in any role status so suspended roles can be drained
    before deletion.
    """

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

    async def handle(self, cmd: UnassignUserFromRole) -> Result[Role, NotFoundError]:
        """Remove the user.

        Returns:
            Success(Role) with the updated role.
            Failure(NotFoundError) if the role does not exist or the user is
                not assigned to it.
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

        if not role.remove_user(cmd.user_id):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_ASSIGNED,
                    message=RoleErrorMessage.USER_NOT_ASSIGNED,
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        await self._role_repo.save(role)
        await self._role_cache.set(role)

        self._logger.info(
            "User removed from role",
            role_id=str(role.id),
            user_id=str(cmd.user_id),
            tenant_id=cmd.tenant_id,
            acting_admin_id=str(cmd.acting_admin_id),
        )
        await self._notifications.user_unassigned(
            role, cmd.user_id, cmd.acting_admin_id
        )

        return Success(value=role)
