"""Reset login attempts handler.

Admin action: clears the failed login counter and lifts any lock.
"""

from src.application.commands.auth_commands import ResetLoginAttempts
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class ResetLoginAttemptsHandler:
    """Handler for ResetLoginAttempts command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: ResetLoginAttempts) -> Result[None, NotFoundError]:
        """Reset the counter.

        Returns:
            Success(None) after persisting.
            Failure(NotFoundError) if the user does not exist in the tenant.
        """
        user = await self._user_repo.find_by_id(cmd.user_id, cmd.tenant_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        user.reset_login_attempts()
        await self._user_repo.save(user)
        self._logger.info(
            "Login attempts reset",
            user_id=str(user.id),
            tenant_id=cmd.tenant_id,
        )
        return Success(value=None)
