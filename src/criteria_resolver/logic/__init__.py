"""
Logic Package - Predicate Composition and Filtering.

Components:
    - AndPredicate, OrPredicate, NotPredicate: Composite predicates
    - FunctionPredicate: Plain callable adapter
    - PredicateFilteringIterable: Lazy filtered view over candidates
    - PredicateSet: Deduplicating set of extracted predicates
"""

from criteria_resolver.logic.filtering import PredicateFilteringIterable
from criteria_resolver.logic.predicate_set import PredicateSet
from criteria_resolver.logic.predicates import (
    AndPredicate,
    BasePredicate,
    FunctionPredicate,
    NotPredicate,
    OrPredicate,
)

__all__ = [
    "AndPredicate",
    "BasePredicate",
    "FunctionPredicate",
    "NotPredicate",
    "OrPredicate",
    "PredicateFilteringIterable",
    "PredicateSet",
]
