"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.device_info import DeviceInfo
from src.domain.value_objects.login_identifier import LoginIdentifier
from src.domain.value_objects.permission_condition import (
    Condition,
    PermissionConditions,
)

__all__ = [
    "Condition",
    "DeviceInfo",
    "LoginIdentifier",
    "PermissionConditions",
]
