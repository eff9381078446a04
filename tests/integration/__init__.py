"""
Integration Tests - Configuration to Resolution.

Test Files:
    - test_resolver_with_config.py: YAML config -> registry -> resolver
"""
