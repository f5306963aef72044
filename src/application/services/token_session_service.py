"""Token/Session Service.

Issues and verifies access/refresh tokens and manages per-device sessions.

Tokens:
    - Stateless, self-verifying (signature + expiry) through a
      TokenSigningProtocol
    - Claims: sub, tenant_id, type, jti, iat, exp (+ sid on refresh tokens
      issued for a session)
    - Revocation stores the jti in a registry until the token would have
      expired anyway; verification consults the registry

Sessions:
    - Stateful records independent of token validity
    - Multi-session: revoking one session never touches another
    - validate_session performs one read and never writes

Rotation:
    - refresh_tokens only honours refresh tokens bound to a live session, so
      revoking a session (or all of them) also ends its refresh tokens
    - The presented refresh token is revoked; reusing it fails

Revocation is idempotent everywhere: repeating a revoke returns the same
answer and never fails.
"""

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.application.dtos.auth_dtos import (
    AccessTokenClaims,
    RefreshTokenClaims,
    TokenInfo,
    TokenPair,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, ExpiredError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.session import Session
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    DeviceEnricher,
    LoggerProtocol,
    SessionRepository,
    TokenRevocationProtocol,
    TokenSigningProtocol,
)
from src.domain.value_objects import DeviceInfo


@dataclass(frozen=True, slots=True, kw_only=True)
class _Claims:
    user_id: UUID
    tenant_id: str
    type: TokenType
    jti: str
    issued_at: datetime
    expires_at: datetime
    session_id: UUID | None = None


class TokenSessionService:
    """Token and session lifecycle.

    Usage:
        service = TokenSessionService(
            signer=JWTService(secret_key=settings.secret_key),
            revocations=InMemoryRevocationRegistry(revocation_cache, keys),
            session_repo=session_repo,
            device_enricher=UserAgentDeviceEnricher(logger),
            logger=logger,
        )

        session_id = await service.create_session(user.id, tenant_id, device)
        access = service.generate_access_token(user.id, tenant_id)
        refresh = service.generate_refresh_token(user.id, tenant_id, session_id)

        match await service.verify_access_token(access):
            case Success(value=claims):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        signer: TokenSigningProtocol,
        revocations: TokenRevocationProtocol,
        session_repo: SessionRepository,
        device_enricher: DeviceEnricher,
        logger: LoggerProtocol,
        access_token_expire_minutes: int = 15,
        refresh_token_expire_days: int = 30,
        session_expire_days: int = 30,
    ) -> None:
        self._signer = signer
        self._revocations = revocations
        self._session_repo = session_repo
        self._device_enricher = device_enricher
        self._logger = logger
        self._access_ttl = timedelta(minutes=access_token_expire_minutes)
        self._refresh_ttl = timedelta(days=refresh_token_expire_days)
        self._session_ttl = timedelta(days=session_expire_days)

    # =========================================================================
    # Tokens
    # =========================================================================

    def generate_access_token(self, user_id: UUID, tenant_id: str) -> str:
        """Issue a short-lived access token."""
        return self._issue(TokenType.ACCESS, user_id, tenant_id, self._access_ttl)

    def generate_refresh_token(
        self, user_id: UUID, tenant_id: str, session_id: UUID | None = None
    ) -> str:
        """Issue a long-lived refresh token, optionally bound to a session."""
        extra = {"sid": str(session_id)} if session_id is not None else {}
        return self._issue(
            TokenType.REFRESH, user_id, tenant_id, self._refresh_ttl, **extra
        )

    async def verify_access_token(
        self, token: str
    ) -> Result[AccessTokenClaims, DomainError]:
        """Verify signature, expiry, type and revocation of an access token.

        Returns:
            Success(AccessTokenClaims) for a usable token.
            Failure(ExpiredError) for an expired token.
            Failure(AuthenticationError) for an invalid, wrong-type or revoked
                token.
        """
        match await self._verify(token, TokenType.ACCESS):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                return Success(
                    value=AccessTokenClaims(
                        user_id=claims.user_id,
                        tenant_id=claims.tenant_id,
                        jti=claims.jti,
                        expires_at=claims.expires_at,
                    )
                )

    async def verify_refresh_token(
        self, token: str
    ) -> Result[RefreshTokenClaims, DomainError]:
        """Verify signature, expiry, type and revocation of a refresh token."""
        match await self._verify(token, TokenType.REFRESH):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                return Success(
                    value=RefreshTokenClaims(
                        user_id=claims.user_id,
                        tenant_id=claims.tenant_id,
                        session_id=claims.session_id,
                        jti=claims.jti,
                        expires_at=claims.expires_at,
                    )
                )

    async def revoke_access_token(self, token: str) -> bool:
        """Revoke an access token.

        Returns:
            True for a genuine access token (also when already revoked or
            expired), False for anything that is not one.
        """
        return await self._revoke(token, TokenType.ACCESS)

    async def revoke_refresh_token(self, token: str) -> bool:
        """Revoke a refresh token. Same contract as revoke_access_token."""
        return await self._revoke(token, TokenType.REFRESH)

    def get_token_info(self, token: str) -> TokenInfo | None:
        """Describe a token without checking its expiry.

        The signature is still verified; forged tokens return None.
        """
        match self._signer.decode(token, verify_exp=False):
            case Failure():
                return None
            case Success(value=raw):
                parsed = self._parse(raw)
                if parsed is None:
                    return None
                return TokenInfo(
                    user_id=parsed.user_id,
                    tenant_id=parsed.tenant_id,
                    issued_at=parsed.issued_at,
                    expires_at=parsed.expires_at,
                    type=parsed.type,
                )

    # =========================================================================
    # Sessions
    # =========================================================================

    async def create_session(
        self,
        user_id: UUID,
        tenant_id: str,
        device_info: DeviceInfo | None = None,
    ) -> UUID:
        """Create a session for a device.

        The user agent, when present, is parsed into a readable device
        description and a device type (an explicit device_type wins).

        Returns:
            The new session id.
        """
        device = device_info or DeviceInfo()
        device_type = device.device_type
        description: str | None = None

        if device.user_agent:
            enrichment = await self._device_enricher.enrich(device.user_agent)
            description = enrichment.device_info
            device_type = device_type or enrichment.device_type

        now = datetime.now(UTC)
        session = Session(
            id=uuid7(),
            user_id=user_id,
            tenant_id=tenant_id,
            user_agent=device.user_agent,
            ip_address=device.ip_address,
            device_type=device_type,
            device_info=description,
            issued_at=now,
            expires_at=now + self._session_ttl,
            last_activity_at=now,
        )
        await self._session_repo.save(session)

        self._logger.info(
            "Session created",
            session_id=str(session.id),
            user_id=str(user_id),
            tenant_id=tenant_id,
            device_type=device_type,
        )
        return session.id

    async def validate_session(
        self, session_id: UUID, user_id: UUID, tenant_id: str
    ) -> Result[Session, DomainError]:
        """Check that a session exists, belongs to the user and is usable.

        Returns:
            Success(Session) for an active session.
            Failure(NotFoundError) if missing or owned by someone else.
            Failure(AuthenticationError) if revoked.
            Failure(ExpiredError) if expired.
        """
        session = await self._session_repo.find_by_id(session_id)
        if session is None or not session.belongs_to(user_id, tenant_id):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.SESSION_NOT_FOUND,
                    message=AuthErrorMessage.SESSION_NOT_FOUND,
                    resource_type="Session",
                    resource_id=str(session_id),
                )
            )

        if session.is_revoked:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.SESSION_REVOKED,
                    message=AuthErrorMessage.SESSION_REVOKED,
                )
            )

        if session.is_expired():
            return Failure(
                error=ExpiredError(
                    code=ErrorCode.SESSION_EXPIRED,
                    message=AuthErrorMessage.SESSION_EXPIRED,
                    expired_at=session.expires_at,
                )
            )

        return Success(value=session)

    async def revoke_session(
        self,
        session_id: UUID,
        user_id: UUID,
        tenant_id: str,
        reason: str = "user_logout",
    ) -> bool:
        """Revoke one session.

        Returns:
            True if the session exists and belongs to the user (also when it
            was already revoked), False otherwise.
        """
        session = await self._session_repo.find_by_id(session_id)
        if session is None or not session.belongs_to(user_id, tenant_id):
            return False

        if session.revoke(reason):
            await self._session_repo.save(session)
            self._logger.info(
                "Session revoked",
                session_id=str(session_id),
                user_id=str(user_id),
                tenant_id=tenant_id,
                reason=reason,
            )
        return True

    async def revoke_all_user_sessions(
        self,
        user_id: UUID,
        tenant_id: str,
        reason: str = "logout_all",
        except_session_id: UUID | None = None,
    ) -> int:
        """Revoke every active session of a user.

        Args:
            user_id: Owner of the sessions.
            tenant_id: Tenant scope.
            reason: Revocation reason recorded on each session.
            except_session_id: Keep this session (e.g. the caller's own).

        Returns:
            Number of sessions that changed state.
        """
        sessions = await self._session_repo.find_by_user(
            user_id, tenant_id, active_only=True
        )
        count = 0
        for session in sessions:
            if session.id == except_session_id:
                continue
            if session.revoke(reason):
                await self._session_repo.save(session)
                count += 1

        self._logger.info(
            "User sessions revoked",
            user_id=str(user_id),
            tenant_id=tenant_id,
            count=count,
            reason=reason,
        )
        return count

    async def list_user_sessions(
        self, user_id: UUID, tenant_id: str, active_only: bool = True
    ) -> list[Session]:
        """List a user's sessions, newest first."""
        return await self._session_repo.find_by_user(
            user_id, tenant_id, active_only=active_only
        )

    async def touch_session(
        self,
        session_id: UUID,
        user_id: UUID,
        tenant_id: str,
        ip_address: str | None = None,
    ) -> bool:
        """Record activity on an active session.

        Returns:
            True if the session was updated, False if it is missing, foreign
            or no longer active.
        """
        session = await self._session_repo.find_by_id(session_id)
        if (
            session is None
            or not session.belongs_to(user_id, tenant_id)
            or not session.is_active()
        ):
            return False
        session.touch(ip_address)
        await self._session_repo.save(session)
        return True

    # =========================================================================
    # Rotation and logout
    # =========================================================================

    async def refresh_tokens(
        self, refresh_token: str
    ) -> Result[TokenPair, DomainError]:
        """Exchange a session-bound refresh token for a new token pair.

        Flow:
        1. Verify the refresh token (signature, expiry, type, revocation)
        2. Require a session binding (sid claim)
        3. Validate the session (exists, owned, not revoked, not expired)
        4. Revoke the presented refresh token (rotation)
        5. Record session activity
        6. Issue a new access token and a refresh token for the same session

        Returns:
            Success(TokenPair) with the rotated credentials.
            Failure(AuthenticationError) for an invalid, revoked (including
                already rotated) or unbound token, or a revoked session.
            Failure(ExpiredError) for an expired token or session.
            Failure(NotFoundError) if the session is gone or foreign.
        """
        match await self.verify_refresh_token(refresh_token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                pass

        if claims.session_id is None:
            return Failure(
                error=self._invalid(AuthErrorMessage.UNBOUND_REFRESH_TOKEN)
            )

        match await self.validate_session(
            claims.session_id, claims.user_id, claims.tenant_id
        ):
            case Failure(error=error):
                self._logger.info(
                    "Token refresh rejected",
                    session_id=str(claims.session_id),
                    user_id=str(claims.user_id),
                    tenant_id=claims.tenant_id,
                    reason=error.code.value,
                )
                return Failure(error=error)
            case Success(value=session):
                pass

        await self._revocations.revoke(
            claims.jti, max(self._seconds_until(claims.expires_at), 1)
        )
        session.touch()
        await self._session_repo.save(session)

        pair = TokenPair(
            access_token=self.generate_access_token(claims.user_id, claims.tenant_id),
            refresh_token=self.generate_refresh_token(
                claims.user_id, claims.tenant_id, session.id
            ),
            session_id=session.id,
            expires_in=int(self._access_ttl.total_seconds()),
        )
        self._logger.info(
            "Tokens refreshed",
            session_id=str(session.id),
            user_id=str(claims.user_id),
            tenant_id=claims.tenant_id,
            rotated_jti=claims.jti,
        )
        return Success(value=pair)

    async def logout(
        self,
        session_id: UUID,
        user_id: UUID,
        tenant_id: str,
        access_token: str | None = None,
        refresh_token: str | None = None,
        reason: str = "user_logout",
    ) -> bool:
        """End a session and revoke the tokens the caller still holds.

        Tokens that do not belong to the same user and tenant are left
        untouched.

        Returns:
            True if the session belongs to the user (also when it was already
            revoked), False otherwise. Nothing is revoked on False.
        """
        if not await self.revoke_session(session_id, user_id, tenant_id, reason):
            return False

        if access_token is not None:
            await self._revoke(
                access_token, TokenType.ACCESS, owner=(user_id, tenant_id)
            )
        if refresh_token is not None:
            await self._revoke(
                refresh_token, TokenType.REFRESH, owner=(user_id, tenant_id)
            )
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _issue(
        self,
        token_type: TokenType,
        user_id: UUID,
        tenant_id: str,
        ttl: timedelta,
        **extra: str,
    ) -> str:
        now = datetime.now(UTC)
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "tenant_id": tenant_id,
            "type": token_type.value,
            "jti": str(uuid7()),
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            **extra,
        }
        return self._signer.sign(claims)

    async def _verify(
        self, token: str, expected: TokenType
    ) -> Result[_Claims, DomainError]:
        match self._signer.decode(token):
            case Failure(error=message):
                if message == AuthErrorMessage.EXPIRED_TOKEN:
                    return Failure(
                        error=ExpiredError(
                            code=ErrorCode.TOKEN_EXPIRED,
                            message=AuthErrorMessage.EXPIRED_TOKEN,
                        )
                    )
                return Failure(error=self._invalid(AuthErrorMessage.INVALID_TOKEN))
            case Success(value=raw):
                claims = self._parse(raw)

        if claims is None:
            return Failure(error=self._invalid(AuthErrorMessage.INVALID_TOKEN))
        if claims.type is not expected:
            return Failure(error=self._invalid(AuthErrorMessage.WRONG_TOKEN_TYPE))

        if await self._revocations.is_revoked(claims.jti):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_REVOKED,
                    message=AuthErrorMessage.REVOKED_TOKEN,
                )
            )
        return Success(value=claims)

    async def _revoke(
        self,
        token: str,
        expected: TokenType,
        owner: tuple[UUID, str] | None = None,
    ) -> bool:
        match self._signer.decode(token, verify_exp=False):
            case Failure():
                return False
            case Success(value=raw):
                claims = self._parse(raw)

        if claims is None or claims.type is not expected:
            return False
        if owner is not None and owner != (claims.user_id, claims.tenant_id):
            return False

        remaining = self._seconds_until(claims.expires_at)
        if remaining > 0:
            await self._revocations.revoke(claims.jti, remaining)
        self._logger.info(
            "Token revoked",
            jti=claims.jti,
            token_type=expected.value,
            user_id=str(claims.user_id),
            tenant_id=claims.tenant_id,
        )
        return True

    @staticmethod
    def _seconds_until(expires_at: datetime) -> int:
        # Rounded up: the marker must not expire before the token does.
        return math.ceil((expires_at - datetime.now(UTC)).total_seconds())

    @staticmethod
    def _parse(raw: dict[str, Any]) -> _Claims | None:
        try:
            sid = raw.get("sid")
            return _Claims(
                user_id=UUID(str(raw["sub"])),
                tenant_id=str(raw["tenant_id"]),
                type=TokenType(raw["type"]),
                jti=str(raw["jti"]),
                issued_at=datetime.fromtimestamp(int(raw["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(raw["exp"]), UTC),
                session_id=UUID(str(sid)) if sid is not None else None,
            )
        except (KeyError, TypeError, ValueError):
            return None

    @staticmethod
    def _invalid(message: str) -> AuthenticationError:
        return AuthenticationError(code=ErrorCode.TOKEN_INVALID, message=message)
