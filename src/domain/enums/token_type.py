"""Token types issued by the token/session service."""

from enum import Enum


class TokenType(str, Enum):
    """Value of the ``type`` claim of a signed token."""

    ACCESS = "access"
    REFRESH = "refresh"
