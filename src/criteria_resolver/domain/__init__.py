"""
Domain Layer - Criteria and Resolution Errors.

Entities:
    - Criterion: Marker base for matching conditions
    - CriteriaSet: Class-indexed set of criteria

Exceptions:
    - ResolverError: Fatal error while deriving predicates from criteria
"""

from criteria_resolver.domain.entities import CriteriaSet, Criterion
from criteria_resolver.domain.exceptions import ResolverError

__all__ = ["CriteriaSet", "Criterion", "ResolverError"]
