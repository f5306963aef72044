"""Outbound notification adapters."""

from src.infrastructure.notifications.logging_role_notifier import LoggingRoleNotifier

__all__ = ["LoggingRoleNotifier"]
