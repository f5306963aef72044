"""Role notifier that records notifications as structured log events.

Default RoleNotificationProtocol implementation for deployments without a
message channel. Swap in a mail/queue adapter at the composition root.
"""

from uuid import UUID

from src.domain.entities.role import Role
from src.domain.protocols import LoggerProtocol


class LoggingRoleNotifier:
    """Implements RoleNotificationProtocol by logging each event at INFO."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger.bind(component="role_notifier")

    async def notify_role_created(self, role: Role, acting_admin_id: UUID) -> None:
        self._logger.info(
            "Role created notification",
            role_id=str(role.id),
            role_code=role.code,
            tenant_id=role.tenant_id,
            acting_admin_id=str(acting_admin_id),
        )

    async def notify_role_deleted(self, role: Role, acting_admin_id: UUID) -> None:
        self._logger.info(
            "Role deleted notification",
            role_id=str(role.id),
            role_code=role.code,
            tenant_id=role.tenant_id,
            acting_admin_id=str(acting_admin_id),
        )

    async def notify_user_assigned(
        self, role: Role, user_id: UUID, acting_admin_id: UUID
    ) -> None:
        self._logger.info(
            "User assigned notification",
            role_id=str(role.id),
            user_id=str(user_id),
            tenant_id=role.tenant_id,
            acting_admin_id=str(acting_admin_id),
        )

    async def notify_user_unassigned(
        self, role: Role, user_id: UUID, acting_admin_id: UUID
    ) -> None:
        self._logger.info(
            "User unassigned notification",
            role_id=str(role.id),
            user_id=str(user_id),
            tenant_id=role.tenant_id,
            acting_admin_id=str(acting_admin_id),
        )
