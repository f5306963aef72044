"""Unit tests for Role entity invariants."""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.enums import RoleStatus


@pytest.mark.unit
class TestRoleConstruction:
    def test_duplicate_user_ids_rejected(self, make_role):
        user_id = uuid7()

        with pytest.raises(ValueError, match="duplicates"):
            make_role(user_ids=[user_id, user_id])

    def test_user_ids_over_capacity_rejected(self, make_role):
        with pytest.raises(ValueError, match="max_users"):
            make_role(max_users=1, user_ids=[uuid7(), uuid7()])

    def test_negative_max_users_rejected(self, make_role):
        with pytest.raises(ValueError):
            make_role(max_users=-1)


@pytest.mark.unit
class TestRoleAssignmentRules:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (RoleStatus.ACTIVE, True),
            (RoleStatus.SUSPENDED, False),
            (RoleStatus.DELETED, False),
        ],
    )
    def test_only_active_roles_accept_users(self, make_role, status, expected):
        assert make_role(status=status).can_assign_users() is expected

    def test_role_without_expiry_never_expires(self, make_role):
        assert make_role(expires_at=None).is_expired() is False

    def test_role_past_expiry_is_expired(self, make_role):
        role = make_role(expires_at=datetime.now(UTC) - timedelta(minutes=1))

        assert role.is_expired() is True

    def test_unlimited_role_is_never_at_capacity(self, make_role):
        role = make_role(user_ids=[uuid7() for _ in range(50)])

        assert role.is_at_capacity() is False

    def test_zero_capacity_role_is_at_capacity(self, make_role):
        assert make_role(max_users=0).is_at_capacity() is True


@pytest.mark.unit
class TestRoleUserList:
    def test_add_user_appends_in_order(self, make_role):
        # Arrange
        role = make_role()
        first, second = uuid7(), uuid7()

        # Act
        role.add_user(first)
        role.add_user(second)

        # Assert
        assert role.user_ids == [first, second]
        assert role.user_count == 2

    def test_add_existing_user_raises(self, make_role):
        user_id = uuid7()
        role = make_role(user_ids=[user_id])

        with pytest.raises(ValueError, match="already assigned"):
            role.add_user(user_id)

    def test_add_user_at_capacity_raises(self, make_role):
        role = make_role(max_users=1, user_ids=[uuid7()])

        with pytest.raises(ValueError, match="user limit"):
            role.add_user(uuid7())

    def test_remove_user(self, make_role):
        user_id = uuid7()
        role = make_role(user_ids=[user_id])

        assert role.remove_user(user_id) is True
        assert role.user_ids == []

    def test_remove_unknown_user_returns_false(self, make_role):
        assert make_role().remove_user(uuid7()) is False


@pytest.mark.unit
class TestRoleTree:
    def test_add_child_is_idempotent(self, make_role):
        role = make_role()
        child_id = uuid7()

        role.add_child(child_id)
        role.add_child(child_id)

        assert role.child_role_ids == [child_id]
        assert role.has_children() is True

    def test_remove_child(self, make_role):
        child_id = uuid7()
        role = make_role(child_role_ids=[child_id])

        assert role.remove_child(child_id) is True
        assert role.remove_child(child_id) is False
        assert role.has_children() is False


@pytest.mark.unit
class TestRoleSoftDelete:
    def test_mark_deleted(self, make_role):
        role = make_role()

        role.mark_deleted()

        assert role.status == RoleStatus.DELETED
        assert role.is_deleted() is True
        assert role.deleted_at is not None
