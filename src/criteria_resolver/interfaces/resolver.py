"""
Resolver Protocol.

A resolver returns the candidates matching a criteria set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from criteria_resolver.domain.entities import CriteriaSet

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ResolverProtocol(Protocol[T_co]):
    """Protocol for criteria-driven resolvers."""

    def resolve(self, criteria: Optional["CriteriaSet"]) -> Iterable[T_co]:
        """Resolve all candidates matching the criteria."""
        ...

    def resolve_single(self, criteria: Optional["CriteriaSet"]) -> Optional[T_co]:
        """Resolve the first candidate matching the criteria, if any."""
        ...
