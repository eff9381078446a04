"""
Domain Entities for Criteria Resolution.

Criterion:
    Marker base for matching conditions. Registries key on the concrete
    criterion type, so any subclass can be mapped to a predicate type.

CriteriaSet:
    Class-indexed set holding at most one criterion per concrete type.
    Iterates in insertion order.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Type, TypeVar

C = TypeVar("C")


class Criterion:
    """Marker base class for a single matching condition."""
    pass


class CriteriaSet:
    """
    Set of criteria indexed by their concrete type.

    Only one criterion of a given type may be held at a time. Adding a
    second criterion of the same type raises unless replacement is
    requested explicitly.

    Usage:
        criteria = CriteriaSet(EntityIdCriterion("foo"), UsageCriterion("signing"))
        criteria.add(EntityIdCriterion("bar"), replace=True)
        usage = criteria.get(UsageCriterion)
    """

    def __init__(self, *criteria: Optional[Any]) -> None:
        """
        Initialize with optional criteria.

        Args:
            *criteria: Criteria to add; None entries are ignored

        Raises:
            ValueError: If two criteria share the same concrete type
        """
        self._index: Dict[type, Any] = {}
        for criterion in criteria:
            if criterion is not None:
                self.add(criterion)

    def add(self, criterion: Any, replace: bool = False) -> bool:
        """
        Add a criterion to the set.

        Args:
            criterion: Criterion to add
            replace: Replace an existing criterion of the same type

        Returns:
            True if the set changed

        Raises:
            ValueError: If criterion is None, or a criterion of the same
                type is present and replace is False
        """
        if criterion is None:
            raise ValueError("Criterion to add cannot be None")

        key = type(criterion)
        existing = self._index.get(key)
        if existing is criterion:
            return False
        if existing is not None and not replace:
            raise ValueError(
                f"Criteria set already contains a criterion of type {key.__name__}"
            )

        self._index[key] = criterion
        return True

    def update(self, criteria: Iterable[Any], replace: bool = False) -> None:
        """Add every criterion from an iterable."""
        for criterion in criteria:
            self.add(criterion, replace=replace)

    def get(self, criterion_type: Type[C]) -> Optional[C]:
        """Get the criterion held for an exact type, if any."""
        return self._index.get(criterion_type)

    def discard(self, criterion: Any) -> bool:
        """
        Remove a criterion if present.

        Returns:
            True if the criterion was removed
        """
        key = type(criterion)
        if self._index.get(key) is criterion:
            del self._index[key]
            return True
        return False

    def clear(self) -> None:
        """Remove all criteria."""
        self._index.clear()

    def is_empty(self) -> bool:
        return not self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._index.values()))

    def __contains__(self, criterion: object) -> bool:
        return self._index.get(type(criterion)) is criterion

    def __repr__(self) -> str:
        names = ", ".join(type(c).__name__ for c in self._index.values())
        return f"CriteriaSet({names})"
