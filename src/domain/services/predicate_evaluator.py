"""Evaluate compiled condition predicates against records.

Predicate trees are produced by PermissionConditions.to_query_predicate():

    {}                                         -> matches everything
    {"status": {"$eq": "active"}}              -> single comparison
    {"$and": [p1, p2]} / {"$or": [p1, p2]}     -> groups

Field names may be dotted ("owner.id") to reach into nested mappings.

Missing fields:
    A field absent from the record never satisfies $eq, $in, $gt, $gte, $lt
    or $lte, and always satisfies $ne and $nin.

Incomparable operands:
    Ordering operators between incomparable types ("a" > 1) are a non-match.
"""

import operator
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Final

_MISSING: Final = object()

_ORDERING: Final[dict[str, Callable[[Any, Any], bool]]] = {
    "$gt": operator.gt,
    "$gte": operator.ge,
    "$lt": operator.lt,
    "$lte": operator.le,
}


class PredicateEvaluator:
    """Stateless evaluator for predicate trees.

    Example:
        >>> evaluator = PredicateEvaluator()
        >>> evaluator.matches({"a": {"$eq": 1}}, {"a": 1})
        True
        >>> evaluator.matches({"$or": [{"a": {"$eq": 1}}, {"b": {"$eq": 2}}]}, {"a": 3})
        False
    """

    def matches(self, predicate: Mapping[str, Any], record: Mapping[str, Any]) -> bool:
        """Check whether a record satisfies a predicate tree.

        Args:
            predicate: Compiled predicate tree.
            record: Attribute mapping to test.

        Returns:
            True if the record satisfies every constraint.

        Raises:
            ValueError: If the predicate is malformed (unknown operator,
                group that is not a list).
        """
        for key, expected in predicate.items():
            if key == "$and":
                if not all(self.matches(p, record) for p in self._group(key, expected)):
                    return False
            elif key == "$or":
                if not any(self.matches(p, record) for p in self._group(key, expected)):
                    return False
            elif key.startswith("$"):
                raise ValueError(f"Unknown predicate group: {key}")
            else:
                if not isinstance(expected, Mapping):
                    raise ValueError(f"Comparison for {key!r} must be an object")
                actual = self._resolve(record, key)
                for symbol, operand in expected.items():
                    if not self._compare(symbol, actual, operand):
                        return False
        return True

    @staticmethod
    def _group(key: str, value: Any) -> Sequence[Mapping[str, Any]]:
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"{key} expects a list of predicates")
        return value

    @staticmethod
    def _resolve(record: Mapping[str, Any], path: str) -> Any:
        if path in record:
            return record[path]

        current: Any = record
        for part in path.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return _MISSING
            current = current[part]
        return current

    @staticmethod
    def _compare(symbol: str, actual: Any, operand: Any) -> bool:
        if symbol == "$eq":
            return actual is not _MISSING and actual == operand
        if symbol == "$ne":
            return actual is _MISSING or actual != operand
        if symbol in ("$in", "$nin"):
            members = operand if isinstance(operand, (list, tuple)) else [operand]
            found = actual is not _MISSING and actual in members
            return found if symbol == "$in" else not found
        if symbol in _ORDERING:
            if actual is _MISSING or actual is None:
                return False
            try:
                return bool(_ORDERING[symbol](actual, operand))
            except TypeError:
                return False
        raise ValueError(f"Unknown comparison operator: {symbol}")
