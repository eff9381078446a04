"""
Resolver Support - Predicate Extraction and Candidate Filtering.

Two stateless operations used in sequence by resolver implementations:

    get_predicates:
        Turns a CriteriaSet into a set of predicates. Criteria that are
        themselves predicates are taken as-is; the rest are mapped through
        an optional registry.

    get_filtered_iterable:
        Combines a set of predicates with AND or OR and returns a lazy,
        order-preserving view of the candidates they accept.
"""

from __future__ import annotations

import itertools
import logging
from typing import (
    TYPE_CHECKING,
    Collection,
    Iterable,
    Optional,
    Sized,
    Type,
    TypeVar,
)

from criteria_resolver.interfaces.predicate import Predicate
from criteria_resolver.logic.filtering import PredicateFilteringIterable
from criteria_resolver.logic.predicate_set import PredicateSet
from criteria_resolver.logic.predicates import AndPredicate, OrPredicate

if TYPE_CHECKING:
    from criteria_resolver.domain.entities import CriteriaSet
    from criteria_resolver.interfaces.predicate_registry import PredicateRegistryProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_predicates(
    criteria_set: Optional["CriteriaSet"],
    predicate_criterion_type: Optional[Type[Predicate[T]]] = None,
    registry: Optional["PredicateRegistryProtocol[T]"] = None,
) -> PredicateSet:
    """
    Obtain a set of predicates based on a criteria set.

    For each criterion, in iteration order:
        1. If it is an instance of predicate_criterion_type it is added
           directly and the registry is not consulted.
        2. Otherwise, if a registry is given, the predicate it returns is
           added. Criteria without a mapping are skipped.
        3. Otherwise the criterion is skipped.

    Duplicates are dropped by the predicates' own equality; predicates
    defining equality without a hash are compared with ==.

    Args:
        criteria_set: Criteria to evaluate
        predicate_criterion_type: Optional type of criteria usable directly
            as predicates
        registry: Optional registry of criterion -> predicate mappings

    Returns:
        Set of predicates, possibly empty

    Raises:
        ResolverError: If the registry fails to evaluate a criterion
    """
    if criteria_set is None:
        return PredicateSet()

    predicates = PredicateSet()

    for criterion in criteria_set:
        if predicate_criterion_type is not None and isinstance(
            criterion, predicate_criterion_type
        ):
            predicates.add(criterion)
        elif registry is not None:
            predicate = registry.get_predicate(criterion)
            if predicate is not None:
                predicates.add(predicate)
            else:
                logger.debug(
                    f"No predicate available for criterion {type(criterion).__qualname__}"
                )

    return predicates


def get_filtered_iterable(
    candidates: Optional[Iterable[T]],
    predicates: Optional[Collection[Predicate[T]]],
    satisfy_any: bool = False,
    on_empty_predicates_return_empty: bool = False,
) -> Iterable[T]:
    """
    Return a filtered iterable of the candidates.

    Args:
        candidates: Candidates to filter
        predicates: Predicates with which to filter
        satisfy_any: If True the predicates are OR-ed, otherwise AND-ed
        on_empty_predicates_return_empty: If True and no predicates are
            supplied, return an empty iterable; otherwise return the
            candidates unchanged

    Returns:
        Lazily filtered candidates, never None
    """
    candidates = _non_empty_or_none(candidates)
    if candidates is None:
        return ()

    if predicates is None or len(predicates) == 0:
        if on_empty_predicates_return_empty:
            return ()
        return candidates

    if satisfy_any:
        predicate: Predicate[T] = OrPredicate(predicates)
    else:
        predicate = AndPredicate(predicates)

    return PredicateFilteringIterable(candidates, predicate)


def _non_empty_or_none(candidates: Optional[Iterable[T]]) -> Optional[Iterable[T]]:
    """
    Return the candidates if they hold at least one element, else None.

    Sized inputs are checked with len(). Other inputs are peeked; when the
    input is a one-shot iterator the peeked element is chained back in
    front so nothing is lost.
    """
    if candidates is None:
        return None

    if isinstance(candidates, Sized):
        return candidates if len(candidates) > 0 else None

    iterator = iter(candidates)
    try:
        first = next(iterator)
    except StopIteration:
        return None

    if iterator is candidates:
        return itertools.chain((first,), iterator)
    return candidates

