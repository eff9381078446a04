"""
Predicate Registry Protocol.

The extraction step only needs a way to map one criterion to at most one
predicate. Any object with a matching get_predicate() can be used, not
just CriterionPredicateRegistry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, TypeVar

if TYPE_CHECKING:
    from criteria_resolver.interfaces.predicate import Predicate

T = TypeVar("T")


class PredicateRegistryProtocol(Protocol[T]):
    """Maps a criterion to a predicate over candidates of type T."""

    def get_predicate(self, criterion: Any) -> Optional["Predicate[T]"]:
        """
        Get a predicate for the criterion.

        Args:
            criterion: Criterion to evaluate

        Returns:
            Predicate instance, or None if the criterion is not mapped

        Raises:
            ResolverError: If the predicate cannot be created
        """
        ...
