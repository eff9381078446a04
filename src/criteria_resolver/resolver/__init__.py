"""
Resolver Package - Predicate Extraction, Filtering and Resolver Base.

Components:
    - get_predicates: CriteriaSet -> set of predicates
    - get_filtered_iterable: Lazy AND/OR filtering of candidates
    - AbstractCriteriaResolver: Base class combining both
"""

from criteria_resolver.resolver.base import AbstractCriteriaResolver
from criteria_resolver.resolver.support import get_filtered_iterable, get_predicates

__all__ = [
    "AbstractCriteriaResolver",
    "get_filtered_iterable",
    "get_predicates",
]
