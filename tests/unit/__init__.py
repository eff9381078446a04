"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_criteria_set.py: Class-indexed criteria set
    - test_predicates.py: Composite predicates and lazy filtering
    - test_predicate_registry.py: Criterion -> predicate registry
    - test_resolver_support.py: Predicate extraction and candidate filtering
    - test_criteria_resolver.py: Resolver base class
    - test_config_loader.py: Configuration loading/validation
"""
