"""Unit tests for role command handlers (Role Assignment Validator).

Tests cover:
- CreateRole: code/name validation, uniqueness, parent linking, cache refresh
- AssignUserToRole: rule order (not found, status, duplicate, capacity, expiry)
- UnassignUserFromRole: not found, not assigned, success
- DeleteRole: system/default immutability, users/children conflicts
- Notifications are best-effort and never undo the mutation

Architecture:
- Mocked RoleRepository and RoleCacheProtocol (AsyncMock)
- Real RoleNotificationDispatcher over a mocked notifier
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.assign_user_to_role_handler import (
    AssignUserToRoleHandler,
)
from src.application.commands.handlers.create_role_handler import CreateRoleHandler
from src.application.commands.handlers.delete_role_handler import DeleteRoleHandler
from src.application.commands.handlers.unassign_user_from_role_handler import (
    UnassignUserFromRoleHandler,
)
from src.application.commands.role_commands import (
    AssignUserToRole,
    CreateRole,
    DeleteRole,
    UnassignUserFromRole,
)
from src.application.services import RoleNotificationDispatcher
from src.core.enums import ErrorCode
from src.core.errors import (
    CapacityError,
    ConflictError,
    ExpiredError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Success
from src.domain.enums import RoleStatus

ADMIN_ID = uuid7()


@pytest.fixture
def role_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_by_code.return_value = None
    repo.find_by_name.return_value = None
    return repo


@pytest.fixture
def role_cache() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def notifier() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def deps(role_repo, role_cache, notifier, mock_logger):
    return {
        "role_repo": role_repo,
        "role_cache": role_cache,
        "notifications": RoleNotificationDispatcher(notifier, mock_logger),
        "logger": mock_logger,
    }


def create_command(**overrides) -> CreateRole:
    fields = {
        "tenant_id": "acme",
        "name": "Billing admin",
        "code": "BILLING_ADMIN",
        "acting_admin_id": ADMIN_ID,
    }
    fields.update(overrides)
    return CreateRole(**fields)


@pytest.mark.unit
class TestCreateRole:
    @pytest.mark.asyncio
    async def test_create_role_success(self, deps, role_repo, role_cache, notifier):
        # Arrange
        handler = CreateRoleHandler(**deps)

        # Act
        result = await handler.handle(create_command(max_users=3, priority=10))

        # Assert
        assert isinstance(result, Success)
        role = result.value
        assert role.code == "BILLING_ADMIN"
        assert role.max_users == 3
        assert role.priority == 10
        assert role.status == RoleStatus.ACTIVE
        assert role.created_by == ADMIN_ID
        role_repo.save.assert_awaited_once_with(role)
        role_cache.set.assert_awaited_once_with(role)
        role_cache.invalidate_lists.assert_awaited_once_with("acme")
        notifier.notify_role_created.assert_awaited_once_with(role, ADMIN_ID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["billing_admin", "A", "1ADMIN", "BILLING-ADMIN"])
    async def test_invalid_code_rejected(self, deps, role_repo, code):
        result = await CreateRoleHandler(**deps).handle(create_command(code=code))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_ROLE_CODE
        role_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    async def test_invalid_name_rejected(self, deps, name):
        result = await CreateRoleHandler(**deps).handle(create_command(name=name))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ROLE_NAME

    @pytest.mark.asyncio
    async def test_name_is_stripped(self, deps, role_repo):
        result = await CreateRoleHandler(**deps).handle(
            create_command(name="  Billing admin  ")
        )

        assert result.value.name == "Billing admin"
        role_repo.find_by_name.assert_awaited_once_with("Billing admin", "acme")

    @pytest.mark.asyncio
    async def test_negative_max_users_rejected(self, deps):
        result = await CreateRoleHandler(**deps).handle(create_command(max_users=-1))

        assert isinstance(result.error, ValidationError)
        assert result.error.field == "max_users"

    @pytest.mark.asyncio
    async def test_duplicate_code_conflicts(self, deps, role_repo, make_role):
        role_repo.find_by_code.return_value = make_role()

        result = await CreateRoleHandler(**deps).handle(create_command())

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.ROLE_CODE_ALREADY_EXISTS
        assert result.error.conflicting_field == "code"

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, deps, role_repo, make_role):
        role_repo.find_by_name.return_value = make_role(code="OTHER")

        result = await CreateRoleHandler(**deps).handle(create_command())

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.ROLE_NAME_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_missing_parent_not_found(self, deps):
        result = await CreateRoleHandler(**deps).handle(
            create_command(parent_role_id=uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ROLE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_parent_links_child(self, deps, role_repo, role_cache, make_role):
        # Arrange
        parent = make_role(code="FINANCE", name="Finance")
        role_repo.find_by_id.return_value = parent

        # Act
        result = await CreateRoleHandler(**deps).handle(
            create_command(parent_role_id=parent.id)
        )

        # Assert
        role = result.value
        assert role.parent_role_id == parent.id
        assert parent.child_role_ids == [role.id]
        assert role_repo.save.await_count == 2
        role_cache.set.assert_any_await(parent)

    @pytest.mark.asyncio
    async def test_notifier_failure_does_not_fail_creation(
        self, deps, role_repo, notifier, mock_logger
    ):
        # Arrange
        notifier.notify_role_created.side_effect = RuntimeError("smtp down")

        # Act
        result = await CreateRoleHandler(**deps).handle(create_command())

        # Assert
        assert isinstance(result, Success)
        role_repo.save.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "Role notification failed"


@pytest.mark.unit
class TestAssignUserToRole:
    def command(self, role_id, user_id=None) -> AssignUserToRole:
        return AssignUserToRole(
            role_id=role_id,
            user_id=user_id or uuid7(),
            tenant_id="acme",
            acting_admin_id=ADMIN_ID,
        )

    @pytest.mark.asyncio
    async def test_assign_success(self, deps, role_repo, role_cache, notifier, make_role):
        # Arrange
        role = make_role()
        role_repo.find_by_id.return_value = role
        user_id = uuid7()

        # Act
        result = await AssignUserToRoleHandler(**deps).handle(
            self.command(role.id, user_id)
        )

        # Assert
        assert isinstance(result, Success)
        assert role.user_ids == [user_id]
        role_repo.save.assert_awaited_once_with(role)
        role_cache.set.assert_awaited_once_with(role)
        notifier.notify_user_assigned.assert_awaited_once_with(role, user_id, ADMIN_ID)

    @pytest.mark.asyncio
    async def test_missing_role_not_found(self, deps):
        result = await AssignUserToRoleHandler(**deps).handle(self.command(uuid7()))

        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [RoleStatus.SUSPENDED, RoleStatus.DELETED])
    async def test_non_active_role_forbidden(self, deps, role_repo, make_role, status):
        role_repo.find_by_id.return_value = make_role(status=status)

        result = await AssignUserToRoleHandler(**deps).handle(self.command(uuid7()))

        assert isinstance(result.error, ForbiddenError)
        assert result.error.code == ErrorCode.ROLE_NOT_ASSIGNABLE

    @pytest.mark.asyncio
    async def test_already_assigned_conflicts(self, deps, role_repo, make_role):
        user_id = uuid7()
        role = make_role(user_ids=[user_id])
        role_repo.find_by_id.return_value = role

        result = await AssignUserToRoleHandler(**deps).handle(
            self.command(role.id, user_id)
        )

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.USER_ALREADY_ASSIGNED
        assert role.user_ids == [user_id]

    @pytest.mark.asyncio
    async def test_full_role_capacity_error(self, deps, role_repo, make_role):
        # Arrange
        existing = [uuid7(), uuid7()]
        role = make_role(max_users=2, user_ids=list(existing))
        role_repo.find_by_id.return_value = role

        # Act
        result = await AssignUserToRoleHandler(**deps).handle(self.command(role.id))

        # Assert
        assert isinstance(result.error, CapacityError)
        assert result.error.limit == 2
        assert "2" in result.error.message
        assert role.user_ids == existing
        role_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_expired_role_expired_error(self, deps, role_repo, make_role):
        expires_at = datetime.now(UTC) - timedelta(days=1)
        role_repo.find_by_id.return_value = make_role(expires_at=expires_at)

        result = await AssignUserToRoleHandler(**deps).handle(self.command(uuid7()))

        assert isinstance(result.error, ExpiredError)
        assert result.error.expired_at == expires_at
        assert expires_at.isoformat() in result.error.message

    @pytest.mark.asyncio
    async def test_duplicate_is_reported_before_capacity(
        self, deps, role_repo, make_role
    ):
        user_id = uuid7()
        role_repo.find_by_id.return_value = make_role(max_users=1, user_ids=[user_id])

        result = await AssignUserToRoleHandler(**deps).handle(
            self.command(uuid7(), user_id)
        )

        assert isinstance(result.error, ConflictError)

    @pytest.mark.asyncio
    async def test_capacity_is_reported_before_expiry(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role(
            max_users=0, expires_at=datetime.now(UTC) - timedelta(days=1)
        )

        result = await AssignUserToRoleHandler(**deps).handle(self.command(uuid7()))

        assert isinstance(result.error, CapacityError)


@pytest.mark.unit
class TestUnassignUserFromRole:
    def command(self, role_id, user_id) -> UnassignUserFromRole:
        return UnassignUserFromRole(
            role_id=role_id, user_id=user_id, tenant_id="acme", acting_admin_id=ADMIN_ID
        )

    @pytest.mark.asyncio
    async def test_unassign_success(self, deps, role_repo, notifier, make_role):
        # Arrange
        user_id = uuid7()
        role = make_role(user_ids=[user_id])
        role_repo.find_by_id.return_value = role

        # Act
        result = await UnassignUserFromRoleHandler(**deps).handle(
            self.command(role.id, user_id)
        )

        # Assert
        assert isinstance(result, Success)
        assert role.user_ids == []
        notifier.notify_user_unassigned.assert_awaited_once_with(role, user_id, ADMIN_ID)

    @pytest.mark.asyncio
    async def test_suspended_role_can_be_drained(self, deps, role_repo, make_role):
        user_id = uuid7()
        role_repo.find_by_id.return_value = make_role(
            status=RoleStatus.SUSPENDED, user_ids=[user_id]
        )

        result = await UnassignUserFromRoleHandler(**deps).handle(
            self.command(uuid7(), user_id)
        )

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_user_not_assigned(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role()

        result = await UnassignUserFromRoleHandler(**deps).handle(
            self.command(uuid7(), uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.USER_NOT_ASSIGNED
        role_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_deleted_role_not_found(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role(status=RoleStatus.DELETED)

        result = await UnassignUserFromRoleHandler(**deps).handle(
            self.command(uuid7(), uuid7())
        )

        assert result.error.code == ErrorCode.ROLE_NOT_FOUND


@pytest.mark.unit
class TestDeleteRole:
    def command(self, role_id) -> DeleteRole:
        return DeleteRole(role_id=role_id, tenant_id="acme", acting_admin_id=ADMIN_ID)

    @pytest.mark.asyncio
    async def test_delete_success(self, deps, role_repo, role_cache, notifier, make_role):
        # Arrange
        role = make_role()
        role_repo.find_by_id.return_value = role

        # Act
        result = await DeleteRoleHandler(**deps).handle(self.command(role.id))

        # Assert
        assert isinstance(result, Success)
        assert role.is_deleted() is True
        role_repo.save.assert_awaited_once_with(role)
        role_cache.delete.assert_awaited_once_with("acme", role.id)
        role_cache.invalidate_lists.assert_awaited_once_with("acme")
        notifier.notify_role_deleted.assert_awaited_once_with(role, ADMIN_ID)

    @pytest.mark.asyncio
    async def test_system_role_forbidden(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role(is_system_role=True)

        result = await DeleteRoleHandler(**deps).handle(self.command(uuid7()))

        assert isinstance(result.error, ForbiddenError)
        assert result.error.code == ErrorCode.SYSTEM_ROLE_IMMUTABLE

    @pytest.mark.asyncio
    async def test_default_role_forbidden(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role(is_default_role=True)

        result = await DeleteRoleHandler(**deps).handle(self.command(uuid7()))

        assert result.error.code == ErrorCode.DEFAULT_ROLE_IMMUTABLE

    @pytest.mark.asyncio
    async def test_role_with_users_conflicts(self, deps, role_repo, make_role):
        role = make_role(user_ids=[uuid7()])
        role_repo.find_by_id.return_value = role

        result = await DeleteRoleHandler(**deps).handle(self.command(role.id))

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.ROLE_HAS_USERS
        assert role.is_deleted() is False

    @pytest.mark.asyncio
    async def test_role_with_children_conflicts(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role(child_role_ids=[uuid7()])

        result = await DeleteRoleHandler(**deps).handle(self.command(uuid7()))

        assert result.error.code == ErrorCode.ROLE_HAS_CHILDREN

    @pytest.mark.asyncio
    async def test_already_deleted_role_not_found(self, deps, role_repo, make_role):
        role_repo.find_by_id.return_value = make_role(status=RoleStatus.DELETED)

        result = await DeleteRoleHandler(**deps).handle(self.command(uuid7()))

        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_delete_unlinks_from_parent(self, deps, role_repo, make_role):
        # Arrange
        parent = make_role(code="FINANCE", name="Finance")
        child = make_role(parent_role_id=parent.id)
        parent.add_child(child.id)
        role_repo.find_by_id.side_effect = [child, parent]

        # Act
        result = await DeleteRoleHandler(**deps).handle(self.command(child.id))

        # Assert
        assert isinstance(result, Success)
        assert parent.child_role_ids == []
        role_repo.save.assert_any_await(parent)
