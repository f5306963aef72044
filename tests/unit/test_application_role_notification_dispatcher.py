"""Unit tests for RoleNotificationDispatcher (best-effort delivery)."""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.services import RoleNotificationDispatcher


@pytest.mark.unit
class TestRoleNotificationDispatcher:
    @pytest.mark.asyncio
    async def test_forwards_each_notification(self, make_role, mock_logger):
        # Arrange
        notifier = AsyncMock()
        dispatcher = RoleNotificationDispatcher(notifier, mock_logger)
        role, user_id, admin_id = make_role(), uuid7(), uuid7()

        # Act
        await dispatcher.role_created(role, admin_id)
        await dispatcher.user_assigned(role, user_id, admin_id)
        await dispatcher.user_unassigned(role, user_id, admin_id)
        await dispatcher.role_deleted(role, admin_id)

        # Assert
        notifier.notify_role_created.assert_awaited_once_with(role, admin_id)
        notifier.notify_user_assigned.assert_awaited_once_with(role, user_id, admin_id)
        notifier.notify_user_unassigned.assert_awaited_once_with(
            role, user_id, admin_id
        )
        notifier.notify_role_deleted.assert_awaited_once_with(role, admin_id)
        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, make_role, mock_logger):
        notifier = AsyncMock()
        notifier.notify_user_assigned.side_effect = ConnectionError("queue offline")
        role = make_role()

        await RoleNotificationDispatcher(notifier, mock_logger).user_assigned(
            role, uuid7(), uuid7()
        )

        mock_logger.warning.assert_called_once()
        kwargs = mock_logger.warning.call_args.kwargs
        assert kwargs["notification"] == "user_assigned"
        assert kwargs["error_type"] == "ConnectionError"
        assert kwargs["role_id"] == str(role.id)
