"""Operators of the permission condition DSL.

Each comparison operator maps onto one predicate symbol of the compiled
query tree:

    eq -> $eq    ne -> $ne    in -> $in    nin -> $nin
    gt -> $gt    gte -> $gte  lt -> $lt    lte -> $lte
"""

from enum import Enum


class ConditionOperator(str, Enum):
    """Comparison operator of a single condition."""

    EQ = "eq"
    NE = "ne"
    IN = "in"
    NIN = "nin"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    @property
    def symbol(self) -> str:
        """Predicate-tree symbol for this operator (e.g. ``$gte``)."""
        return f"${self.value}"

    @property
    def expects_sequence(self) -> bool:
        """Membership operators compare against a list of values."""
        return self in (ConditionOperator.IN, ConditionOperator.NIN)


class LogicalOperator(str, Enum):
    """Connective carried by a condition."""

    AND = "and"
    OR = "or"
