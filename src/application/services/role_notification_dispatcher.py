"""Best-effort dispatch of role notifications.

Notifications never roll back the role mutation that triggered them. A
failing notifier is logged as a warning and otherwise ignored; nothing is
retried.

Usage:
    notifications = RoleNotificationDispatcher(notifier, logger)
    await notifications.user_assigned(role, user_id, acting_admin_id)
"""

from collections.abc import Awaitable, Callable
from uuid import UUID

from src.domain.entities.role import Role
from src.domain.protocols import LoggerProtocol, RoleNotificationProtocol


class RoleNotificationDispatcher:
    """Wraps a RoleNotificationProtocol so failures stay local."""

    def __init__(
        self, notifier: RoleNotificationProtocol, logger: LoggerProtocol
    ) -> None:
        self._notifier = notifier
        self._logger = logger

    async def role_created(self, role: Role, acting_admin_id: UUID) -> None:
        await self._send(
            "role_created",
            role,
            lambda: self._notifier.notify_role_created(role, acting_admin_id),
        )

    async def role_deleted(self, role: Role, acting_admin_id: UUID) -> None:
        await self._send(
            "role_deleted",
            role,
            lambda: self._notifier.notify_role_deleted(role, acting_admin_id),
        )

    async def user_assigned(
        self, role: Role, user_id: UUID, acting_admin_id: UUID
    ) -> None:
        await self._send(
            "user_assigned",
            role,
            lambda: self._notifier.notify_user_assigned(role, user_id, acting_admin_id),
        )

    async def user_unassigned(
        self, role: Role, user_id: UUID, acting_admin_id: UUID
    ) -> None:
        await self._send(
            "user_unassigned",
            role,
            lambda: self._notifier.notify_user_unassigned(
                role, user_id, acting_admin_id
            ),
        )

    async def _send(
        self, event: str, role: Role, send: Callable[[], Awaitable[None]]
    ) -> None:
        try:
            await send()
        except Exception as e:
            self._logger.warning(
                "Role notification failed",
                notification=event,
                role_id=str(role.id),
                tenant_id=role.tenant_id,
                error_type=type(e).__name__,
                error_message=str(e),
            )
