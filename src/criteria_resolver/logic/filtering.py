"""
Lazy Predicate Filtering.

PredicateFilteringIterable wraps a candidate iterable and a predicate.
Nothing is evaluated at construction; each iteration pulls from the
underlying candidates and tests one element at a time.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from criteria_resolver.interfaces.predicate import Predicate

T = TypeVar("T")


class PredicateFilteringIterable(Generic[T]):
    """
    Iterable yielding the candidates accepted by a predicate.

    Order of the underlying candidates is preserved. Every call to
    __iter__ starts a fresh traversal, so the result can be iterated again
    as long as the underlying candidates can.
    """

    def __init__(self, candidates: Iterable[T], predicate: Predicate[T]) -> None:
        """
        Initialize filtering iterable.

        Args:
            candidates: Candidates to filter
            predicate: Predicate deciding which candidates are kept
        """
        if candidates is None:
            raise ValueError("Candidates cannot be None")
        if predicate is None:
            raise ValueError("Predicate cannot be None")
        self._candidates = candidates
        self._predicate = predicate

    @property
    def predicate(self) -> Predicate[T]:
        return self._predicate

    def __iter__(self) -> Iterator[T]:
        for candidate in self._candidates:
            if self._predicate.evaluate(candidate):
                yield candidate

    def __repr__(self) -> str:
        return f"PredicateFilteringIterable(predicate={self._predicate!r})"
