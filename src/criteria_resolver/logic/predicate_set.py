"""
Predicate Set.

Deduplicating collection for extracted predicates. Hashable predicates
are tracked by hash and equality like a built-in set. Predicates that
define structural equality without a hash (e.g. plain dataclasses) are
compared with == against the unhashable entries already held.

Iteration follows insertion order.
"""

from __future__ import annotations

from collections.abc import MutableSet
from typing import Any, Iterable, Iterator, List, Optional, Set


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class PredicateSet(MutableSet):
    """Insertion-ordered set of predicates tolerating unhashable members."""

    def __init__(self, predicates: Optional[Iterable[Any]] = None) -> None:
        self._hashed: Set[Any] = set()
        self._unhashed: List[Any] = []
        self._order: List[Any] = []
        for predicate in predicates or ():
            self.add(predicate)

    def add(self, predicate: Any) -> None:
        if predicate in self:
            return
        if _is_hashable(predicate):
            self._hashed.add(predicate)
        else:
            self._unhashed.append(predicate)
        self._order.append(predicate)

    def discard(self, predicate: Any) -> None:
        if predicate not in self:
            return
        if _is_hashable(predicate):
            self._hashed.discard(predicate)
        else:
            self._unhashed.remove(predicate)
        self._order = [p for p in self._order if not _same_entry(p, predicate)]

    def __contains__(self, predicate: object) -> bool:
        if _is_hashable(predicate):
            return predicate in self._hashed
        return predicate in self._unhashed

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._order))

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"PredicateSet({self._order!r})"


def _same_entry(held: Any, predicate: Any) -> bool:
    if _is_hashable(held) != _is_hashable(predicate):
        return False
    return held == predicate
