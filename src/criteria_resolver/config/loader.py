"""
Configuration Loader.

Reads resolver configuration from YAML, validates it with the Pydantic
models and turns its mapping section into a CriterionPredicateRegistry.
Mapping file paths in the configuration are taken relative to the
loader's base path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from criteria_resolver.config.models import CriteriaResolverConfig
from criteria_resolver.registry.predicate_registry import CriterionPredicateRegistry

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Builds validated resolver configuration and registries."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = Path(base_path) if base_path else Path(".")

    def load(self, config_path: Union[str, Path]) -> CriteriaResolverConfig:
        """
        Load and validate a YAML configuration file.

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If the file does not exist
            ValidationError: If a value is rejected by the models
        """
        path = self._under_base(config_path)
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        logger.debug(f"Loaded resolver configuration from {path}")
        return self.load_from_dict(raw)

    def load_from_dict(self, raw: Dict[str, Any]) -> CriteriaResolverConfig:
        return CriteriaResolverConfig.model_validate(raw)

    def build_registry(self, config: CriteriaResolverConfig) -> CriterionPredicateRegistry:
        """
        Build a registry from the mappings in a configuration.

        Mapping files are loaded before the inline mappings, so inline
        entries win.
        """
        registry: CriterionPredicateRegistry = CriterionPredicateRegistry()
        for mapping_file in config.registry.mapping_files:
            registry.load_mappings_file(self._under_base(mapping_file))
        registry.load_mappings(config.registry.mappings)
        logger.info(f"Built predicate registry with {registry.registered_count} mappings")
        return registry

    def _under_base(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p


def apply_logging_config(config: CriteriaResolverConfig) -> None:
    """Set the package logger level from configuration."""
    logging.getLogger("criteria_resolver").setLevel(config.logging.level_number)
