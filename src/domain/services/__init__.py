"""Domain services (stateless business logic spanning value objects)."""

from src.domain.services.predicate_evaluator import PredicateEvaluator

__all__ = ["PredicateEvaluator"]
