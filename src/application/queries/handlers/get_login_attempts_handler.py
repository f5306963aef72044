"""Get login attempts handler."""

from src.application.queries.auth_queries import GetLoginAttempts
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import UserRepository
from src.domain.value_objects import LoginIdentifier


class GetLoginAttemptsHandler:
    """Read a user's failed login counter.

    Unknown identifiers report 0 so the query cannot be used to probe for
    existing accounts.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetLoginAttempts) -> Result[int, DomainError]:
        try:
            login = LoginIdentifier.parse(query.identifier)
        except ValueError:
            return Success(value=0)

        if login.is_email:
            user = await self._user_repo.find_by_email(login.value, query.tenant_id)
        else:
            user = await self._user_repo.find_by_username(login.value, query.tenant_id)

        return Success(value=user.login_attempts if user else 0)
