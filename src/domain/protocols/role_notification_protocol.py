"""Role notification protocol.

Notifications are fire-and-forget. A failing notifier never rolls back the
role mutation that triggered it; the caller logs the failure and moves on.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Role


class RoleNotificationProtocol(Protocol):
    """Outbound notifications about role changes."""

    async def notify_role_created(self, role: Role, acting_admin_id: UUID) -> None:
        ...

    async def notify_role_deleted(self, role: Role, acting_admin_id: UUID) -> None:
        ...

    async def notify_user_assigned(
        self, role: Role, user_id: UUID, acting_admin_id: UUID
    ) -> None:
        ...

    async def notify_user_unassigned(
        self, role: Role, user_id: UUID, acting_admin_id: UUID
    ) -> None:
        ...
