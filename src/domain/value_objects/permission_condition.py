"""Permission condition value objects.

A permission of type API or DATA may carry an ordered list of attribute
conditions. The list compiles into a backend-neutral predicate tree that
query layers (or PredicateEvaluator) apply to candidate records.

Wire shape:
    [{"field": "status", "operator": "eq", "value": "active"},
     {"field": "type", "operator": "in", "value": ["user", "admin"],
      "logicalOperator": "or"}]

Compiled shape:
    {"$or": [{"status": {"$eq": "active"}},
             {"type": {"$in": ["user", "admin"]}}]}

Grouping:
    One connective per group. Conditions are AND-ed unless a condition after
    the first carries logicalOperator "or", which turns the whole group into
    an $or. Mixed AND/OR precedence is not expressible in this model.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import ConditionOperator, LogicalOperator


@dataclass(frozen=True, slots=True)
class Condition:
    """A single attribute condition.

    Attributes:
        field: Record attribute the condition applies to (dotted paths allowed).
        operator: Comparison operator.
        value: Operand. Never None.
        logical_operator: Optional connective ('and' or 'or').

    Raises:
        ValueError: If any attribute is invalid.

    Example:
        >>> Condition("status", "eq", "active").to_predicate()
        {'status': {'$eq': 'active'}}
    """

    field: str
    operator: ConditionOperator
    value: Any
    logical_operator: LogicalOperator | None = None

    def __post_init__(self) -> None:
        """Validate and normalise attributes (string operators become enums)."""
        if not isinstance(self.field, str) or not self.field.strip():
            raise ValueError("Condition field must be a non-empty string")

        try:
            operator = ConditionOperator(self.operator)
        except ValueError:
            raise ValueError(f"Invalid condition operator: {self.operator!r}") from None
        object.__setattr__(self, "operator", operator)

        if self.value is None:
            raise ValueError("Condition value must not be null")
        if isinstance(self.value, (list, tuple)):
            # Own a copy so later mutation of the caller's list cannot leak in
            object.__setattr__(self, "value", list(self.value))

        if self.logical_operator is not None:
            try:
                logical = LogicalOperator(self.logical_operator)
            except ValueError:
                raise ValueError(
                    f"Invalid logical operator: {self.logical_operator!r}"
                ) from None
            object.__setattr__(self, "logical_operator", logical)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Condition":
        """Build a condition from its wire representation.

        Accepts both ``logicalOperator`` (wire) and ``logical_operator`` keys.

        Raises:
            ValueError: If the mapping is malformed.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Condition must be an object")
        logical = data.get("logicalOperator", data.get("logical_operator"))
        return cls(
            field=data.get("field"),  # type: ignore[arg-type]
            operator=data.get("operator"),  # type: ignore[arg-type]
            value=data.get("value"),
            logical_operator=logical,
        )

    def to_predicate(self) -> dict[str, dict[str, Any]]:
        """Compile into ``{field: {$op: value}}``.

        Membership operators always receive a list; a scalar operand is
        wrapped into a one-element list.
        """
        value = self.value
        if self.operator.expects_sequence and not isinstance(value, list):
            value = [value]
        return {self.field: {self.operator.symbol: value}}

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the wire representation."""
        data: dict[str, Any] = {
            "field": self.field,
            "operator": self.operator.value,
            "value": self.value,
        }
        if self.logical_operator is not None:
            data["logicalOperator"] = self.logical_operator.value
        return data


@dataclass(frozen=True, slots=True)
class PermissionConditions:
    """Ordered, validated list of conditions attached to a permission.

    Construction is atomic: either every entry validates or nothing is
    built. Use ``create`` to get a Result instead of an exception.

    Attributes:
        conditions: The conditions in declaration order.
    """

    conditions: tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        conditions = tuple(self.conditions)
        for condition in conditions:
            if not isinstance(condition, Condition):
                raise ValueError("PermissionConditions only holds Condition objects")
        object.__setattr__(self, "conditions", conditions)

    @classmethod
    def create(
        cls, raw: Iterable[Mapping[str, Any] | Condition] | None
    ) -> Result["PermissionConditions", ValidationError]:
        """Validate every entry and build the value object.

        Args:
            raw: Wire-format dicts and/or Condition objects. None means empty.

        Returns:
            Success(PermissionConditions) if every entry is valid.
            Failure(ValidationError) naming the first invalid entry otherwise.

        Example:
            >>> result = PermissionConditions.create(
            ...     [{"field": "a", "operator": "eq", "value": 1}]
            ... )
            >>> result.value.condition_count()
            1
        """
        if raw is None:
            return Success(value=cls())
        if isinstance(raw, (str, bytes, Mapping)):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_CONDITION,
                    message="Conditions must be a list",
                    field="conditions",
                )
            )

        built: list[Condition] = []
        for index, entry in enumerate(raw):
            try:
                condition = (
                    entry if isinstance(entry, Condition) else Condition.from_dict(entry)
                )
            except ValueError as e:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_CONDITION,
                        message=f"Invalid condition at position {index}: {e}",
                        field=f"conditions[{index}]",
                    )
                )
            built.append(condition)

        return Success(value=cls(conditions=tuple(built)))

    @classmethod
    def empty(cls) -> "PermissionConditions":
        """Conditions that match every record."""
        return cls()

    @classmethod
    def simple(
        cls, field: str, operator: ConditionOperator | str, value: Any
    ) -> "PermissionConditions":
        """Single-condition shortcut.

        Raises:
            ValueError: If the condition is invalid.
        """
        return cls(conditions=(Condition(field, operator, value),))  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self) -> Iterator[Condition]:
        return iter(self.conditions)

    def has_conditions(self) -> bool:
        return bool(self.conditions)

    def condition_count(self) -> int:
        return len(self.conditions)

    def fields(self) -> list[str]:
        """Distinct fields in first-seen order."""
        return list(dict.fromkeys(c.field for c in self.conditions))

    def operators(self) -> list[str]:
        """Distinct operators in first-seen order."""
        return list(dict.fromkeys(c.operator.value for c in self.conditions))

    def is_complex(self) -> bool:
        return len(self.conditions) > 1

    def has_logical_operator(self) -> bool:
        return any(c.logical_operator is not None for c in self.conditions)

    def uses_or(self) -> bool:
        """Whether the group compiles to $or.

        Only conditions after the first can switch the connective; a logical
        operator on the first condition has nothing to join.
        """
        return any(c.logical_operator is LogicalOperator.OR for c in self.conditions[1:])

    def to_query_predicate(self) -> dict[str, Any]:
        """Compile into a predicate tree.

        Returns:
            {} for no conditions, ``{field: {$op: value}}`` for one, and
            ``{"$and": [...]}`` or ``{"$or": [...]}`` for several.
        """
        if not self.conditions:
            return {}
        if len(self.conditions) == 1:
            return self.conditions[0].to_predicate()

        predicates = [c.to_predicate() for c in self.conditions]
        connective = "$or" if self.uses_or() else "$and"
        return {connective: predicates}

    def to_list(self) -> list[dict[str, Any]]:
        """Serialise to the wire representation."""
        return [c.to_dict() for c in self.conditions]
