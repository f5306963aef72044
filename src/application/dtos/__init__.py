"""Application DTOs."""

from src.application.dtos.auth_dtos import (
    AccessTokenClaims,
    AuthenticatedUser,
    RefreshTokenClaims,
    TokenInfo,
    TokenPair,
)

__all__ = [
    "AccessTokenClaims",
    "AuthenticatedUser",
    "RefreshTokenClaims",
    "TokenInfo",
    "TokenPair",
]
