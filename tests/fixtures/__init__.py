"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - criteria.py: Test criteria, predicates and candidates
    - predicate_mappings.yaml: Registry mapping file
    - sample_config.yaml: Sample configuration for testing
"""
