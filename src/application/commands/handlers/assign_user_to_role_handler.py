"""Assign user to role handler.

Flow:
1. Load role (NotFound)
2. Role status must allow assignment (Forbidden)
3. User not yet assigned (Conflict)
4. Role below max_users (Capacity)
5. Role not expired (Expired)
6. Append user, persist, refresh cache, notify (best-effort)

Checks run before any mutation, so a rejected assignment leaves user_ids
untouched.
"""

from src.application.commands.role_commands import AssignUserToRole
from src.application.services.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import (
    CapacityError,
    ConflictError,
    DomainError,
    ExpiredError,
    ForbiddenError,
    NotFoundError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.errors import RoleErrorMessage
from src.domain.protocols import LoggerProtocol, RoleCacheProtocol, RoleRepository


class AssignUserToRoleHandler:
    """Handler for AssignUserToRole command."""

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

    async def handle(self, cmd: AssignUserToRole) -> Result[Role, DomainError]:
        """Assign the user.

        Returns:
            Success(Role) with the updated role.
            Failure(NotFoundError | ForbiddenError | ConflictError |
                CapacityError | ExpiredError) naming the violated rule.
        """
        role = await self._role_repo.find_by_id(cmd.role_id, cmd.tenant_id)
        if role is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ROLE_NOT_FOUND,
                    message=RoleErrorMessage.ROLE_NOT_FOUND,
                    resource_type="Role",
                    resource_id=str(cmd.role_id),
                )
            )

        if not role.can_assign_users():
            return Failure(
                error=ForbiddenError(
                    code=ErrorCode.ROLE_NOT_ASSIGNABLE,
                    message=RoleErrorMessage.NOT_ASSIGNABLE.format(
                        status=role.status.value
                    ),
                    resource_type="Role",
                )
            )

        if role.has_user(cmd.user_id):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_ASSIGNED,
                    message=RoleErrorMessage.USER_ALREADY_ASSIGNED,
                    resource_type="Role",
                    conflicting_field="user_ids",
                )
            )

        if role.max_users is not None and role.is_at_capacity():
            return Failure(
                error=CapacityError(
                    code=ErrorCode.ROLE_CAPACITY_REACHED,
                    message=RoleErrorMessage.CAPACITY_REACHED.format(
                        limit=role.max_users
                    ),
                    limit=role.max_users,
                )
            )

        if role.expires_at is not None and role.is_expired():
            return Failure(
                error=ExpiredError(
                    code=ErrorCode.ROLE_EXPIRED,
                    message=RoleErrorMessage.EXPIRED.format(
                        expires_at=role.expires_at.isoformat()
                    ),
                    expired_at=role.expires_at,
                )
            )

        role.add_user(cmd.user_id)
        await self._role_repo.save(role)
        await self._role_cache.set(role)

        self._logger.info(
            "User assigned to role",
            role_id=str(role.id),
            user_id=str(cmd.user_id),
            tenant_id=cmd.tenant_id,
            acting_admin_id=str(cmd.acting_admin_id),
        )
        await self._notifications.user_assigned(role, cmd.user_id, cmd.acting_admin_id)

        return Success(value=role)
