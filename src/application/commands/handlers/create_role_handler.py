"""Create role handler.

Flow:
1. Validate code format and name length
2. Reject duplicate code or name within the tenant
3. Resolve the parent role, if any
4. Persist the role, link it into the parent's children
5. Refresh caches, notify (best-effort)
"""

import re

from uuid_extensions import uuid7

from src.application.commands.role_commands import CreateRole
from src.application.services.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.errors import RoleErrorMessage
from src.domain.protocols import LoggerProtocol, RoleCacheProtocol, RoleRepository

ROLE_CODE_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]{1,49}$")
ROLE_NAME_MAX_LENGTH = 100


class CreateRoleHandler:
    """Handler for CreateRole command."""

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

    async def handle(self, cmd: CreateRole) -> Result[Role, DomainError]:
        """Create the role.

        Returns:
            Success(Role) with the persisted role.
            Failure(ValidationError) for a malformed code, name or max_users.
            Failure(ConflictError) for a duplicate code or name.
            Failure(NotFoundError) if the parent role does not exist.
        """
        if not ROLE_CODE_PATTERN.match(cmd.code):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ROLE_CODE,
                    message=RoleErrorMessage.INVALID_CODE,
                    field="code",
                )
            )

        name = cmd.name.strip()
        if not 1 <= len(name) <= ROLE_NAME_MAX_LENGTH:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ROLE_NAME,
                    message=RoleErrorMessage.INVALID_NAME,
                    field="name",
                )
            )

        if cmd.max_users is not None and cmd.max_users < 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="max_users must not be negative",
                    field="max_users",
                )
            )

        if await self._role_repo.find_by_code(cmd.code, cmd.tenant_id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ROLE_CODE_ALREADY_EXISTS,
                    message=RoleErrorMessage.CODE_EXISTS.format(code=cmd.code),
                    resource_type="Role",
                    conflicting_field="code",
                )
            )

        if await self._role_repo.find_by_name(name, cmd.tenant_id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ROLE_NAME_ALREADY_EXISTS,
                    message=RoleErrorMessage.NAME_EXISTS.format(name=name),
                    resource_type="Role",
                    conflicting_field="name",
                )
            )

        parent: Role | None = None
        if cmd.parent_role_id is not None:
            parent = await self._role_repo.find_by_id(cmd.parent_role_id, cmd.tenant_id)
            if parent is None or parent.is_deleted():
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ROLE_NOT_FOUND,
                        message=RoleErrorMessage.PARENT_NOT_FOUND,
                        resource_type="Role",
                        resource_id=str(cmd.parent_role_id),
                    )
                )

        role = Role(
            id=uuid7(),
            tenant_id=cmd.tenant_id,
            name=name,
            code=cmd.code,
            description=cmd.description,
            priority=cmd.priority,
            permission_ids=list(cmd.permission_ids),
            max_users=cmd.max_users,
            expires_at=cmd.expires_at,
            is_system_role=cmd.is_system_role,
            is_default_role=cmd.is_default_role,
            parent_role_id=cmd.parent_role_id,
            created_by=cmd.acting_admin_id,
        )
        await self._role_repo.save(role)

        if parent is not None:
            parent.add_child(role.id)
            await self._role_repo.save(parent)
            await self._role_cache.set(parent)

        await self._role_cache.set(role)
        await self._role_cache.invalidate_lists(cmd.tenant_id)

        self._logger.info(
            "Role created",
            role_id=str(role.id),
            code=role.code,
            tenant_id=role.tenant_id,
            acting_admin_id=str(cmd.acting_admin_id),
        )
        await self._notifications.role_created(role, cmd.acting_admin_id)

        return Success(value=role)
