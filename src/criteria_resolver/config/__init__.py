"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - CriteriaResolverConfig: Root configuration object
    - ResolverSettings: AND/OR and empty-predicate behavior
    - RegistryConfig: Criterion -> predicate mappings
    - LoggingConfig: Package log level

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Registry mappings from files and inline entries
"""

from criteria_resolver.config.loader import ConfigLoader, apply_logging_config
from criteria_resolver.config.models import (
    CriteriaResolverConfig,
    LoggingConfig,
    RegistryConfig,
    ResolverSettings,
)

__all__ = [
    "ConfigLoader",
    "CriteriaResolverConfig",
    "LoggingConfig",
    "RegistryConfig",
    "ResolverSettings",
    "apply_logging_config",
]
