"""Token signing protocol for domain layer.

The signing algorithm is not prescribed: given claims, an implementation
returns a signed string; given a string, it returns the claims or a failure.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
"""

from typing import Any, Protocol

from src.core.result import Result


class TokenSigningProtocol(Protocol):
    """Sign and decode self-verifying tokens.

    Usage:
        token = signer.sign({"sub": str(user_id), "exp": 1700000900})

        match signer.decode(token):
            case Success(value=claims):
                user_id = UUID(claims["sub"])
            case Failure(error=message):
                # AuthErrorMessage.INVALID_TOKEN or EXPIRED_TOKEN
                ...
    """

    def sign(self, claims: dict[str, Any]) -> str:
        """Sign claims into a token string."""
        ...

    def decode(
        self, token: str, *, verify_exp: bool = True
    ) -> Result[dict[str, Any], str]:
        """Verify the signature (and expiry) and return the claims.

        Args:
            token: Token string.
            verify_exp: Reject expired tokens. Disable to inspect a token
                regardless of its age.

        Returns:
            Success(claims) or Failure(message) where message distinguishes
            an expired token from any other invalid token.
        """
        ...
