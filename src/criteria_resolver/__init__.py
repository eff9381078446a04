"""
Criteria Resolver - Predicate Support for Resolver Components.

A small library for resolver-style components that select, from a
collection of candidates, the subset matching a caller-supplied set of
criteria.

Pipeline:
    1. Extraction: derive a set of predicates from a CriteriaSet, either
       directly (criteria that are themselves predicates) or through a
       CriterionPredicateRegistry.
    2. Filtering: combine the predicates with AND/OR semantics and lazily
       filter the candidate iterable.

Main Components:
    - domain: Criterion, CriteriaSet, ResolverError
    - interfaces: Predicate and registry protocols
    - logic: Composite predicates and the lazy filtering iterable
    - registry: Criterion type -> predicate type registry
    - resolver: get_predicates, get_filtered_iterable, resolver base class
    - config: Configuration models and loaders

Example:
    >>> from criteria_resolver import CriteriaSet, get_predicates, get_filtered_iterable
    >>> predicates = get_predicates(criteria, EvaluableCriterion, registry)
    >>> matches = get_filtered_iterable(candidates, predicates, satisfy_any=False)

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Criteria Resolver.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import criteria_resolver
        >>> criteria_resolver.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("criteria_resolver").setLevel(level)


from criteria_resolver.domain import CriteriaSet, Criterion, ResolverError  # noqa: E402
from criteria_resolver.interfaces import Predicate  # noqa: E402
from criteria_resolver.registry import CriterionPredicateRegistry  # noqa: E402
from criteria_resolver.resolver import (  # noqa: E402
    AbstractCriteriaResolver,
    get_filtered_iterable,
    get_predicates,
)

__all__ = [
    "AbstractCriteriaResolver",
    "CriteriaSet",
    "Criterion",
    "CriterionPredicateRegistry",
    "Predicate",
    "ResolverError",
    "configure_logging",
    "get_filtered_iterable",
    "get_predicates",
]
