"""Application services (orchestration shared by several handlers)."""

from src.application.services.role_notification_dispatcher import (
    RoleNotificationDispatcher,
)
from src.application.services.token_session_service import TokenSessionService

__all__ = [
    "RoleNotificationDispatcher",
    "TokenSessionService",
]
