"""
Criteria Resolver Base.

AbstractCriteriaResolver wires predicate extraction and candidate
filtering together. Subclasses only supply the candidates for a given
criteria set.

Usage:
    class KeyResolver(AbstractCriteriaResolver[Key]):
        def get_candidates(self, criteria):
            return self._keys

    resolver = KeyResolver(
        registry=registry,
        predicate_criterion_type=EvaluableKeyCriterion,
        settings=ResolverSettings(satisfy_any=False),
    )
    key = resolver.resolve_single(CriteriaSet(EntityIdCriterion("foo")))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, Type, TypeVar

from criteria_resolver.config.models import ResolverSettings
from criteria_resolver.domain.entities import CriteriaSet
from criteria_resolver.interfaces.predicate import Predicate
from criteria_resolver.interfaces.predicate_registry import PredicateRegistryProtocol
from criteria_resolver.resolver.support import get_filtered_iterable, get_predicates

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AbstractCriteriaResolver(ABC, Generic[T]):
    """Resolver filtering its candidates by predicates derived from criteria."""

    def __init__(
        self,
        registry: Optional[PredicateRegistryProtocol[T]] = None,
        predicate_criterion_type: Optional[Type[Predicate[T]]] = None,
        settings: Optional[ResolverSettings] = None,
    ) -> None:
        """
        Initialize resolver.

        Args:
            registry: Optional criterion -> predicate registry
            predicate_criterion_type: Optional type of criteria usable
                directly as predicates
            settings: AND/OR and empty-predicate behavior
        """
        self.registry = registry
        self.predicate_criterion_type = predicate_criterion_type
        self.settings = settings or ResolverSettings()

    @abstractmethod
    def get_candidates(self, criteria: Optional[CriteriaSet]) -> Optional[Iterable[T]]:
        """
        Get the candidates to be filtered for the criteria.

        Args:
            criteria: Criteria being resolved

        Returns:
            Candidate iterable, or None if there are no candidates
        """
        ...

    def resolve(self, criteria: Optional[CriteriaSet]) -> Iterable[T]:
        """
        Resolve all candidates matching the criteria.

        Raises:
            ResolverError: If predicates cannot be derived from the criteria
        """
        predicates = get_predicates(
            criteria, self.predicate_criterion_type, self.registry
        )
        logger.debug(
            f"{type(self).__name__} resolving with {len(predicates)} predicate(s)"
        )
        return get_filtered_iterable(
            self.get_candidates(criteria),
            predicates,
            satisfy_any=self.settings.satisfy_any,
            on_empty_predicates_return_empty=self.settings.on_empty_predicates_return_empty,
        )

    def resolve_single(self, criteria: Optional[CriteriaSet]) -> Optional[T]:
        """Resolve the first matching candidate, or None if nothing matches."""
        return next(iter(self.resolve(criteria)), None)
