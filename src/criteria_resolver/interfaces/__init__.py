"""
Interfaces Layer - Abstract Protocols.

Protocols:
    - Predicate: Boolean test over a candidate
    - PredicateRegistryProtocol: Criterion -> predicate lookup
    - ResolverProtocol: Criteria-driven candidate resolution

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Small, focused interfaces
"""

from criteria_resolver.interfaces.predicate import Predicate
from criteria_resolver.interfaces.predicate_registry import PredicateRegistryProtocol
from criteria_resolver.interfaces.resolver import ResolverProtocol

__all__ = ["Predicate", "PredicateRegistryProtocol", "ResolverProtocol"]
