"""Pytest configuration and shared fixtures.

Settings require SECRET_KEY, so a test key is placed in the environment before
any application module is imported.

Fixtures:
- mock_logger: LoggerProtocol double whose bind() returns itself
- password_service: Deterministic PasswordHashingProtocol (no bcrypt cost)
- make_user / make_role / make_permission: Entity factories
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars-long")
os.environ.setdefault("ENVIRONMENT", "testing")

from collections.abc import Callable  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.domain.entities import Permission, Role, User  # noqa: E402
from src.domain.enums import PermissionType, UserStatus  # noqa: E402

TENANT = "acme"
OTHER_TENANT = "globex"


class FakePasswordService:
    """Password service with a readable, reversible 'hash'."""

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_logger() -> Mock:
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def password_service() -> FakePasswordService:
    return FakePasswordService()


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for active users with password "SecurePass123!"."""

    def _make(**overrides: Any) -> User:
        fields: dict[str, Any] = {
            "id": uuid7(),
            "tenant_id": TENANT,
            "email": "alice@example.com",
            "username": "alice",
            "password_hash": "hashed:SecurePass123!",
            "status": UserStatus.ACTIVE,
        }
        fields.update(overrides)
        return User(**fields)

    return _make


@pytest.fixture
def make_role() -> Callable[..., Role]:
    def _make(**overrides: Any) -> Role:
        fields: dict[str, Any] = {
            "id": uuid7(),
            "tenant_id": TENANT,
            "name": "Billing admin",
            "code": "BILLING_ADMIN",
            "created_at": datetime.now(UTC),
        }
        fields.update(overrides)
        return Role(**fields)

    return _make


@pytest.fixture
def make_permission() -> Callable[..., Permission]:
    def _make(**overrides: Any) -> Permission:
        fields: dict[str, Any] = {
            "id": uuid7(),
            "tenant_id": TENANT,
            "code": "invoice:read",
            "name": "Read invoices",
            "type": PermissionType.DATA,
            "action": "read",
            "resource": "invoice",
        }
        fields.update(overrides)
        return Permission(**fields)

    return _make
