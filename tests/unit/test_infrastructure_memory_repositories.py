"""Unit tests for the in-memory repositories.

Tests cover:
- Tenant isolation on every finder
- Copy semantics (changes are only visible after save)
- Role finders skipping soft-deleted roles, listing order
- Session listing order and active filter
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.entities import Session
from src.domain.enums import RoleStatus
from src.infrastructure.persistence.memory import (
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)


@pytest.mark.unit
class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, make_user):
        user = make_user()
        repo = InMemoryUserRepository([user])

        found = await repo.find_by_email("ALICE@Example.com", "acme")

        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_find_by_username(self, make_user):
        user = make_user()
        repo = InMemoryUserRepository([user])

        assert (await repo.find_by_username("alice", "acme")).id == user.id
        assert await repo.find_by_username("Alice", "acme") is None

    @pytest.mark.asyncio
    async def test_tenant_isolation(self, make_user):
        user = make_user()
        repo = InMemoryUserRepository([user])

        assert await repo.find_by_id(user.id, "globex") is None
        assert await repo.find_by_email(user.email, "globex") is None
        assert await repo.find_by_username(user.username, "globex") is None

    @pytest.mark.asyncio
    async def test_changes_need_save(self, make_user):
        # Arrange
        user = make_user()
        repo = InMemoryUserRepository([user])
        loaded = await repo.find_by_id(user.id, "acme")

        # Act
        loaded.record_failed_login()

        # Assert
        assert (await repo.find_by_id(user.id, "acme")).login_attempts == 0
        await repo.save(loaded)
        assert (await repo.find_by_id(user.id, "acme")).login_attempts == 1


@pytest.mark.unit
class TestInMemoryRoleRepository:
    @pytest.mark.asyncio
    async def test_find_by_code_and_name(self, make_role):
        role = make_role()
        repo = InMemoryRoleRepository([role])

        assert (await repo.find_by_code("BILLING_ADMIN", "acme")).id == role.id
        assert (await repo.find_by_name("Billing admin", "acme")).id == role.id
        assert await repo.find_by_code("BILLING_ADMIN", "globex") is None

    @pytest.mark.asyncio
    async def test_deleted_roles_only_visible_by_id(self, make_role):
        role = make_role(status=RoleStatus.DELETED)
        repo = InMemoryRoleRepository([role])

        assert (await repo.find_by_id(role.id, "acme")).is_deleted()
        assert await repo.find_by_code(role.code, "acme") is None
        assert await repo.find_by_name(role.name, "acme") is None
        assert await repo.find_by_tenant("acme") == []

    @pytest.mark.asyncio
    async def test_find_by_tenant_orders_by_priority_then_code(self, make_role):
        repo = InMemoryRoleRepository(
            [
                make_role(code="VIEWER", name="Viewer", priority=1),
                make_role(code="AUDITOR", name="Auditor", priority=1),
                make_role(code="OWNER", name="Owner", priority=9),
                make_role(tenant_id="globex", code="OTHER", name="Other"),
            ]
        )

        roles = await repo.find_by_tenant("acme")

        assert [r.code for r in roles] == ["OWNER", "AUDITOR", "VIEWER"]

    @pytest.mark.asyncio
    async def test_find_by_tenant_filters_status(self, make_role):
        repo = InMemoryRoleRepository(
            [
                make_role(code="ACTIVE_ONE", name="A"),
                make_role(code="PAUSED", name="B", status=RoleStatus.SUSPENDED),
            ]
        )

        roles = await repo.find_by_tenant("acme", status=RoleStatus.SUSPENDED)

        assert [r.code for r in roles] == ["PAUSED"]


@pytest.mark.unit
class TestInMemoryPermissionRepository:
    @pytest.mark.asyncio
    async def test_find_by_id_and_code(self, make_permission):
        permission = make_permission()
        repo = InMemoryPermissionRepository([permission])

        assert (await repo.find_by_id(permission.id, "acme")).code == "invoice:read"
        assert (await repo.find_by_code("invoice:read", "acme")).id == permission.id
        assert await repo.find_by_id(permission.id, "globex") is None


@pytest.mark.unit
class TestInMemorySessionRepository:
    @pytest.mark.asyncio
    async def test_find_by_user_newest_first_and_active_only(self):
        # Arrange
        repo = InMemorySessionRepository()
        user_id = uuid7()
        now = datetime.now(UTC)
        older = Session(
            id=uuid7(),
            user_id=user_id,
            tenant_id="acme",
            issued_at=now - timedelta(hours=2),
            expires_at=now + timedelta(days=1),
        )
        newer = Session(
            id=uuid7(),
            user_id=user_id,
            tenant_id="acme",
            issued_at=now - timedelta(hours=1),
            expires_at=now + timedelta(days=1),
        )
        revoked = Session(
            id=uuid7(),
            user_id=user_id,
            tenant_id="acme",
            issued_at=now,
            is_revoked=True,
        )
        for session in (older, newer, revoked):
            await repo.save(session)

        # Act
        active = await repo.find_by_user(user_id, "acme")
        everything = await repo.find_by_user(user_id, "acme", active_only=False)

        # Assert
        assert [s.id for s in active] == [newer.id, older.id]
        assert [s.id for s in everything] == [revoked.id, newer.id, older.id]
        assert await repo.find_by_user(user_id, "globex") == []

    @pytest.mark.asyncio
    async def test_find_by_id_returns_copy(self):
        repo = InMemorySessionRepository()
        session = Session(id=uuid7(), user_id=uuid7(), tenant_id="acme")
        await repo.save(session)

        loaded = await repo.find_by_id(session.id)
        loaded.revoke("admin_action")

        assert (await repo.find_by_id(session.id)).is_revoked is False
