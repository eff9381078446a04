"""
Predicate Protocol.

A predicate is a pure boolean test over a candidate value. Criteria that
can evaluate candidates themselves implement this protocol and bypass
the registry during extraction.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - runtime_checkable so it can serve as the direct predicate type
    - Equality and hashing are left to the implementation (identity by default)
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Predicate(Protocol[T_contra]):
    """Boolean test over a candidate."""

    def evaluate(self, candidate: T_contra) -> bool:
        """
        Evaluate the candidate.

        Args:
            candidate: Value to test

        Returns:
            True if the candidate satisfies this predicate
        """
        ...
