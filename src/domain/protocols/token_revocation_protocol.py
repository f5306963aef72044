"""Token revocation registry protocol.

Tokens are stateless, so revoking one means remembering its identifier
(jti) until the token would have expired anyway.
"""

from typing import Protocol


class TokenRevocationProtocol(Protocol):
    """Registry of revoked token identifiers.

    Implementations:
        - InMemoryRevocationRegistry: process-local TTL cache
        - RedisRevocationRegistry: shared across processes (SET key 1 EX ttl)
    """

    async def revoke(self, jti: str, ttl_seconds: int) -> None:
        """Remember a revoked token id for ttl_seconds (idempotent)."""
        ...

    async def is_revoked(self, jti: str) -> bool:
        """Check whether a token id was revoked and is still remembered."""
        ...
