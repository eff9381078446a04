"""
Registry Module - Criterion to Predicate Mappings.

Components:
    - CriterionPredicateRegistry: Thread-safe criterion type -> predicate type registry
    - import_by_name: Resolve a dotted name to an object
"""

from criteria_resolver.registry.predicate_registry import (
    CriterionPredicateRegistry,
    import_by_name,
)

__all__ = [
    "CriterionPredicateRegistry",
    "import_by_name",
]
