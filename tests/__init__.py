"""
Test Suite for Criteria Resolver.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Configuration-to-resolution tests
    - fixtures/: Shared criteria, predicates and YAML files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/criteria_resolver      # With coverage
"""
