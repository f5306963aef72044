"""Edge validation schemas (pydantic)."""

from src.schemas.permission_schemas import ConditionSchema, parse_conditions

__all__ = ["ConditionSchema", "parse_conditions"]
