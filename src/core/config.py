"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Secrets (signing key) have no default and must be supplied

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    threshold = settings.max_login_attempts

    if settings.is_development:
        # Dev-specific behavior
        ...
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Identity core settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    app_name: str = Field(
        default="Gatekeeper",
        description="Application name, bound to every log line",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON log output. Defaults to JSON outside development.",
    )

    # Authentication guard
    max_login_attempts: int = Field(
        default=5,
        ge=1,
        description="Consecutive failed logins before the account is locked",
    )
    lock_duration_minutes: int = Field(
        default=30,
        ge=1,
        description="How long an account stays locked after reaching the threshold",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds (10-14 recommended, 12 = ~300ms)",
    )

    # Tokens and sessions
    secret_key: str = Field(
        min_length=32,
        description="Secret key for token signing (must be kept secure)",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="Token signing algorithm",
    )
    access_token_expire_minutes: int = Field(
        default=15,
        ge=1,
        description="Access token lifetime in minutes",
    )
    refresh_token_expire_days: int = Field(
        default=30,
        ge=1,
        description="Refresh token lifetime in days",
    )
    session_expire_days: int = Field(
        default=30,
        ge=1,
        description="Session lifetime in days",
    )
    revocation_backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Where revoked token ids are kept (memory or redis)",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (required when revocation_backend=redis)",
    )

    # Cache
    cache_enabled: bool = Field(
        default=True,
        description="Disable to make every cache read miss (fail-open)",
    )
    cache_max_size: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of cache entries before eviction",
    )
    cache_default_ttl_seconds: int = Field(
        default=3600,
        ge=1,
        description="TTL applied when a cache write does not pass one",
    )
    cache_cleanup_interval_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Interval of the background sweep that drops expired entries",
    )
    cache_key_prefix: str = Field(
        default="gatekeeper",
        description="Prefix of every tenant-scoped cache key",
    )
    role_cache_ttl_seconds: int = Field(
        default=3600,
        ge=1,
        description="TTL of cached role snapshots",
    )
    permission_cache_ttl_seconds: int = Field(
        default=1800,
        ge=1,
        description="TTL of cached permission snapshots",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Reject rounds outside bcrypt's own 4-31 range."""
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the log level and reject unknown names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
