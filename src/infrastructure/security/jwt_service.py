"""JWT token signer (adapter).

Implements TokenSigningProtocol with PyJWT and an HMAC algorithm (HS256 by
default). The service only signs and verifies; which claims go into a token
is decided by the Token/Session Service.

Security:
    - 256-bit secret key minimum
    - Signature always verified, expiry verified unless explicitly disabled
    - Expired tokens are reported separately from otherwise invalid ones
"""

from typing import Any

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage


class JWTService:
    """JWT signing and verification.

    Usage:
        signer = JWTService(secret_key=settings.secret_key)
        token = signer.sign({"sub": str(user_id), "exp": 1700000900})

        match signer.decode(token):
            case Success(value=claims):
                ...
            case Failure(error=message):
                ...
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing, at least 32 characters.
            algorithm: JWT algorithm name.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm

    def sign(self, claims: dict[str, Any]) -> str:
        """Encode and sign claims (header.payload.signature)."""
        token: str = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return token

    def decode(
        self, token: str, *, verify_exp: bool = True
    ) -> Result[dict[str, Any], str]:
        """Verify a token and return its claims.

        Args:
            token: JWT string.
            verify_exp: Reject expired tokens (default). Disable to inspect
                or revoke a token regardless of its age.

        Returns:
            Success(claims), Failure(AuthErrorMessage.EXPIRED_TOKEN) for an
            expired token, or Failure(AuthErrorMessage.INVALID_TOKEN).
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": verify_exp, "require": ["exp", "iat"]},
            )
            return Success(value=payload)
        except ExpiredSignatureError:
            return Failure(error=AuthErrorMessage.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthErrorMessage.INVALID_TOKEN)
