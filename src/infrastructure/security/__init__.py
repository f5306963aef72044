"""Security adapters: password hashing, token signing, revocation."""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.revocation_registry import (
    InMemoryRevocationRegistry,
    RedisRevocationRegistry,
)

__all__ = [
    "BcryptPasswordService",
    "InMemoryRevocationRegistry",
    "JWTService",
    "RedisRevocationRegistry",
]
