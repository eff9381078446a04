"""
Composite Predicates.

Provides:
    - BasePredicate: Callable base for predicate implementations
    - AndPredicate / OrPredicate: Short-circuiting conjunction and disjunction
    - NotPredicate: Negation
    - FunctionPredicate: Adapter for plain callables

Components of a composite are evaluated in the order they were supplied
and evaluation stops at the first deciding result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Tuple, TypeVar

from criteria_resolver.interfaces.predicate import Predicate

T = TypeVar("T")


class BasePredicate(ABC, Generic[T]):
    """Base class making predicates usable as plain callables."""

    @abstractmethod
    def evaluate(self, candidate: T) -> bool:
        """Return True if the candidate satisfies this predicate."""
        ...

    def __call__(self, candidate: T) -> bool:
        return self.evaluate(candidate)


class _CompositePredicate(BasePredicate[T]):
    """Predicate built from one or more component predicates."""

    def __init__(self, predicates: Iterable[Predicate[T]]) -> None:
        """
        Initialize with component predicates.

        Args:
            predicates: Components to combine

        Raises:
            ValueError: If no components are supplied
        """
        self._predicates: Tuple[Predicate[T], ...] = tuple(predicates)
        if not self._predicates:
            raise ValueError(f"{type(self).__name__} requires at least one predicate")

    @property
    def predicates(self) -> Tuple[Predicate[T], ...]:
        return self._predicates

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._predicates)!r})"


class AndPredicate(_CompositePredicate[T]):
    """True iff every component predicate is true."""

    def evaluate(self, candidate: T) -> bool:
        return all(p.evaluate(candidate) for p in self._predicates)


class OrPredicate(_CompositePredicate[T]):
    """True iff any component predicate is true."""

    def evaluate(self, candidate: T) -> bool:
        return any(p.evaluate(candidate) for p in self._predicates)


class NotPredicate(BasePredicate[T]):
    """Negates another predicate."""

    def __init__(self, predicate: Predicate[T]) -> None:
        if predicate is None:
            raise ValueError("Predicate to negate cannot be None")
        self._predicate = predicate

    def evaluate(self, candidate: T) -> bool:
        return not self._predicate.evaluate(candidate)

    def __repr__(self) -> str:
        return f"NotPredicate({self._predicate!r})"


class FunctionPredicate(BasePredicate[T]):
    """
    Adapts a plain callable to the Predicate protocol.

    Two adapters wrapping the same function are still distinct predicates;
    equality stays reference identity like any closure.
    """

    def __init__(self, func: Callable[[T], bool]) -> None:
        if not callable(func):
            raise ValueError("FunctionPredicate requires a callable")
        self._func = func

    def evaluate(self, candidate: T) -> bool:
        return bool(self._func(candidate))

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionPredicate({name})"
