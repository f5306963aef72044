"""Authentication DTOs (Data Transfer Objects).

Result dataclasses returned by the Authentication Guard and the
Token/Session Service.

DTOs:
    - AuthenticatedUser: Result of AuthenticateUser
    - AccessTokenClaims: Result of verify_access_token
    - RefreshTokenClaims: Result of verify_refresh_token
    - TokenInfo: Result of get_token_info
    - TokenPair: Result of refresh_tokens
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import TokenType


@dataclass(frozen=True, kw_only=True)
class AuthenticatedUser:
    """Response from successful authentication.

    Contains user data needed for session creation and token generation.

    Attributes:
        user_id: User's unique identifier.
        tenant_id: Tenant the user authenticated in.
        email: User's email address (normalized).
        username: User's login name.
    """

    user_id: UUID
    tenant_id: str
    email: str
    username: str


@dataclass(frozen=True, kw_only=True)
class AccessTokenClaims:
    """Verified access token.

    Attributes:
        user_id: Token subject.
        tenant_id: Tenant the token was issued in.
        jti: Unique token id (revocation key).
        expires_at: Token expiry.
    """

    user_id: UUID
    tenant_id: str
    jti: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class RefreshTokenClaims:
    """Verified refresh token.

    Attributes:
        user_id: Token subject.
        tenant_id: Tenant the token was issued in.
        session_id: Session the token was issued for (None if not bound).
        jti: Unique token id (revocation key).
        expires_at: Token expiry.
    """

    user_id: UUID
    tenant_id: str
    session_id: UUID | None
    jti: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class TokenInfo:
    """Unverified-expiry token metadata (signature still checked).

    Attributes:
        user_id: Token subject.
        tenant_id: Tenant the token was issued in.
        issued_at: When the token was issued.
        expires_at: When the token expires (may be in the past).
        type: ACCESS or REFRESH.
    """

    user_id: UUID
    tenant_id: str
    issued_at: datetime
    expires_at: datetime
    type: TokenType


@dataclass(frozen=True, kw_only=True)
class TokenPair:
    """Rotated credentials for a session.

    Attributes:
        access_token: New access token.
        refresh_token: New refresh token bound to session_id.
        session_id: Session the pair belongs to.
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    session_id: UUID
    token_type: str = "bearer"
    expires_in: int = 900
