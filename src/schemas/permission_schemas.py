"""Permission condition schemas.

Pydantic models that validate the condition DSL at the edge, before it
reaches the domain value objects.

Wire shape:
    [{"field": "status", "operator": "eq", "value": "active"},
     {"field": "type", "operator": "in", "value": ["user", "admin"],
      "logicalOperator": "or"}]
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import ConditionOperator, LogicalOperator
from src.domain.value_objects import PermissionConditions


class ConditionSchema(BaseModel):
    """One condition of the DSL."""

    field: str = Field(
        ...,
        min_length=1,
        description="Record attribute (dotted paths reach nested objects)",
        examples=["status", "owner.id"],
    )
    operator: ConditionOperator = Field(
        ...,
        description="Comparison operator",
        examples=["eq", "in"],
    )
    value: Any = Field(
        ...,
        description="Operand; must not be null",
        examples=["active", ["user", "admin"]],
    )
    logical_operator: LogicalOperator | None = Field(
        default=None,
        alias="logicalOperator",
        description="Connective to the previous condition ('and' or 'or')",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "field": "type",
                "operator": "in",
                "value": ["user", "admin"],
                "logicalOperator": "or",
            }
        },
    )

    @field_validator("field")
    @classmethod
    def field_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("field must not be blank")
        return v

    @field_validator("value")
    @classmethod
    def value_not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("value must not be null")
        return v


_CONDITION_LIST = TypeAdapter(list[ConditionSchema])


def parse_conditions(payload: Any) -> Result[PermissionConditions, ValidationError]:
    """Validate a raw DSL payload and build the domain value object.

    Args:
        payload: Decoded JSON (expected: list of condition objects).

    Returns:
        Success(PermissionConditions) or Failure(ValidationError) naming the
        first offending location.
    """
    try:
        schemas = _CONDITION_LIST.validate_python(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_CONDITION,
                message=f"Invalid conditions: {first['msg']}",
                field=f"conditions.{location}" if location else "conditions",
            )
        )

    return PermissionConditions.create(
        s.model_dump(by_alias=True, exclude_none=True) for s in schemas
    )
