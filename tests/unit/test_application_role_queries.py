"""Unit tests for GetRoleHandler (read-through role cache)."""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.queries.handlers.get_role_handler import GetRoleHandler
from src.application.queries.role_queries import GetRole
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import RoleStatus


@pytest.fixture
def role_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    return repo


@pytest.fixture
def role_cache() -> AsyncMock:
    cache = AsyncMock()
    cache.get.return_value = None
    return cache


@pytest.mark.unit
class TestGetRoleHandler:
    @pytest.mark.asyncio
    async def test_cache_hit_skips_repository(self, role_repo, role_cache, make_role):
        role = make_role()
        role_cache.get.return_value = role

        result = await GetRoleHandler(role_repo, role_cache).handle(
            GetRole(role_id=role.id, tenant_id="acme")
        )

        assert result == Success(value=role)
        role_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cache_miss_loads_and_populates(
        self, role_repo, role_cache, make_role
    ):
        # Arrange
        role = make_role()
        role_repo.find_by_id.return_value = role

        # Act
        result = await GetRoleHandler(role_repo, role_cache).handle(
            GetRole(role_id=role.id, tenant_id="acme")
        )

        # Assert
        assert isinstance(result, Success)
        role_repo.find_by_id.assert_awaited_once_with(role.id, "acme")
        role_cache.set.assert_awaited_once_with(role)

    @pytest.mark.asyncio
    async def test_missing_role_not_found(self, role_repo, role_cache):
        result = await GetRoleHandler(role_repo, role_cache).handle(
            GetRole(role_id=uuid7(), tenant_id="acme")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_deleted_role_not_found_and_not_cached(
        self, role_repo, role_cache, make_role
    ):
        role_repo.find_by_id.return_value = make_role(status=RoleStatus.DELETED)

        result = await GetRoleHandler(role_repo, role_cache).handle(
            GetRole(role_id=uuid7(), tenant_id="acme")
        )

        assert isinstance(result, Failure)
        role_cache.set.assert_not_awaited()
