"""Runtime environment types.

Used by Settings to pick environment-specific behaviour such as the log
renderer (human-readable console output in development, JSON elsewhere).
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
