"""Unit tests for AuthenticateUserHandler (Authentication Guard).

Tests cover:
- Successful authentication by email and by username
- Unknown identifier and wrong password share one message
- Failed attempt counting and lock at the threshold
- Locked accounts (no counting while locked)
- Lazy unlock once the lock has expired
- Inactive accounts
- Unexpected exceptions become a generic failure

Architecture:
- Real User entities, mocked repository protocol
- Deterministic password service (no bcrypt cost)
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from src.application.commands.auth_commands import AuthenticateUser
from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
)
from src.application.dtos import AuthenticatedUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ForbiddenError, LockedError
from src.core.result import Failure, Success
from src.domain.enums import UserStatus
from src.domain.errors import AuthErrorMessage


def command(identifier: str = "alice@example.com", password: str = "SecurePass123!"):
    return AuthenticateUser(identifier=identifier, password=password, tenant_id="acme")


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.find_by_username.return_value = None
    return repo


@pytest.fixture
def handler(user_repo, password_service, mock_logger) -> AuthenticateUserHandler:
    return AuthenticateUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        logger=mock_logger,
        max_login_attempts=5,
        lock_duration_minutes=30,
    )


@pytest.mark.unit
class TestAuthenticateUserSuccess:
    @pytest.mark.asyncio
    async def test_success_by_email_returns_authenticated_user(
        self, handler, user_repo, make_user
    ):
        # Arrange
        user = make_user()
        user_repo.find_by_email.return_value = user

        # Act
        result = await handler.handle(command())

        # Assert
        assert isinstance(result, Success)
        assert result.value == AuthenticatedUser(
            user_id=user.id,
            tenant_id="acme",
            email="alice@example.com",
            username="alice",
        )
        user_repo.find_by_email.assert_awaited_once_with("alice@example.com", "acme")

    @pytest.mark.asyncio
    async def test_email_lookup_is_normalized(self, handler, user_repo, make_user):
        user_repo.find_by_email.return_value = make_user()

        await handler.handle(command(identifier="  Alice@Example.COM "))

        user_repo.find_by_email.assert_awaited_once_with("alice@example.com", "acme")

    @pytest.mark.asyncio
    async def test_success_by_username(self, handler, user_repo, make_user):
        user_repo.find_by_username.return_value = make_user()

        result = await handler.handle(command(identifier="alice"))

        assert isinstance(result, Success)
        user_repo.find_by_username.assert_awaited_once_with("alice", "acme")
        user_repo.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_success_resets_counter(self, handler, user_repo, make_user):
        # Arrange
        user = make_user(login_attempts=3)
        user_repo.find_by_email.return_value = user

        # Act
        await handler.handle(command())

        # Assert
        assert user.login_attempts == 0
        user_repo.save.assert_awaited_once_with(user)


@pytest.mark.unit
class TestAuthenticateUserInvalidCredentials:
    @pytest.mark.asyncio
    async def test_unknown_user_returns_invalid_credentials(self, handler):
        result = await handler.handle(command(identifier="nobody@example.com"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.login_attempts is None

    @pytest.mark.asyncio
    async def test_malformed_email_is_unknown_user(self, handler, user_repo):
        result = await handler.handle(command(identifier="not-an@email"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        user_repo.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_password_has_same_message_as_unknown_user(
        self, handler, user_repo, make_user
    ):
        # Arrange
        unknown = await handler.handle(command(identifier="nobody@example.com"))
        user_repo.find_by_email.return_value = make_user()

        # Act
        wrong = await handler.handle(command(password="wrong"))

        # Assert
        assert wrong.error.message == unknown.error.message
        assert wrong.error.message == AuthErrorMessage.INVALID_CREDENTIALS

    @pytest.mark.asyncio
    async def test_wrong_password_increments_and_persists(
        self, handler, user_repo, make_user
    ):
        # Arrange
        user = make_user(login_attempts=1)
        user_repo.find_by_email.return_value = user

        # Act
        result = await handler.handle(command(password="wrong"))

        # Assert
        assert result.error.login_attempts == 2
        assert user.login_attempts == 2
        assert user.locked_until is None
        user_repo.save.assert_awaited_once_with(user)


@pytest.mark.unit
class TestAuthenticateUserLockout:
    @pytest.mark.asyncio
    async def test_threshold_failure_locks_account(self, handler, user_repo, make_user):
        # Arrange
        user = make_user(login_attempts=4)
        user_repo.find_by_email.return_value = user
        before = datetime.now(UTC)

        # Act
        result = await handler.handle(command(password="wrong"))

        # Assert
        assert isinstance(result.error, AuthenticationError)
        assert result.error.login_attempts == 5
        assert user.locked_until is not None
        assert user.locked_until >= before + timedelta(minutes=30)
        assert user.lock_reason == AuthErrorMessage.ACCOUNT_LOCKED_TOO_MANY_ATTEMPTS

    @pytest.mark.asyncio
    async def test_five_failures_then_locked(self, handler, user_repo, make_user):
        # Arrange
        user = make_user()
        user_repo.find_by_email.return_value = user

        # Act
        for _ in range(5):
            await handler.handle(command(password="wrong"))
        result = await handler.handle(command())

        # Assert
        assert isinstance(result.error, LockedError)
        assert result.error.code == ErrorCode.ACCOUNT_LOCKED
        assert result.error.locked_until == user.locked_until

    @pytest.mark.asyncio
    async def test_locked_account_rejects_correct_password_without_counting(
        self, handler, user_repo, make_user
    ):
        # Arrange
        until = datetime.now(UTC) + timedelta(minutes=10)
        user = make_user(login_attempts=5, locked_until=until)
        user_repo.find_by_email.return_value = user

        # Act
        result = await handler.handle(command())

        # Assert
        assert isinstance(result.error, LockedError)
        assert until.isoformat() in result.error.message
        assert user.login_attempts == 5
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_counter_at_threshold_without_lock_locks(
        self, handler, user_repo, make_user
    ):
        user = make_user(login_attempts=5)
        user_repo.find_by_email.return_value = user

        result = await handler.handle(command())

        assert isinstance(result.error, LockedError)
        assert user.is_locked() is True
        assert result.error.locked_until == user.locked_until
        assert user.locked_until.isoformat() in result.error.message
        user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_expired_lock_is_lifted_before_password_check(
        self, handler, user_repo, make_user
    ):
        # Arrange
        user = make_user(
            login_attempts=5,
            locked_until=datetime.now(UTC) - timedelta(seconds=1),
        )
        user_repo.find_by_email.return_value = user

        # Act
        result = await handler.handle(command())

        # Assert
        assert isinstance(result, Success)
        assert user.locked_until is None
        assert user.login_attempts == 0

    @pytest.mark.asyncio
    async def test_expired_lock_with_wrong_password_starts_from_one(
        self, handler, user_repo, make_user
    ):
        user = make_user(
            login_attempts=5,
            locked_until=datetime.now(UTC) - timedelta(seconds=1),
        )
        user_repo.find_by_email.return_value = user

        result = await handler.handle(command(password="wrong"))

        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.login_attempts == 1


@pytest.mark.unit
class TestAuthenticateUserAccountStatus:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status", [UserStatus.PENDING, UserStatus.SUSPENDED, UserStatus.DELETED]
    )
    async def test_inactive_account_forbidden(
        self, handler, user_repo, make_user, status
    ):
        user_repo.find_by_email.return_value = make_user(status=status)

        result = await handler.handle(command())

        assert isinstance(result.error, ForbiddenError)
        assert result.error.code == ErrorCode.ACCOUNT_INACTIVE

    @pytest.mark.asyncio
    async def test_inactive_account_does_not_count_attempts(
        self, handler, user_repo, make_user
    ):
        user = make_user(status=UserStatus.SUSPENDED)
        user_repo.find_by_email.return_value = user

        await handler.handle(command(password="wrong"))

        assert user.login_attempts == 0
        user_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestAuthenticateUserUnexpectedErrors:
    @pytest.mark.asyncio
    async def test_repository_exception_becomes_generic_failure(
        self, handler, user_repo, mock_logger
    ):
        # Arrange
        user_repo.find_by_email.side_effect = RuntimeError("connection reset")

        # Act
        result = await handler.handle(command())

        # Assert
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.AUTHENTICATION_FAILED
        mock_logger.error.assert_called_once()
