"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator


class ResolverSettings(BaseModel):
    """How extracted predicates are applied to candidates."""

    satisfy_any: bool = False
    on_empty_predicates_return_empty: bool = False

    model_config = {"frozen": True}


class RegistryConfig(BaseModel):
    """Criterion -> predicate mappings to load into a registry."""

    mappings: Dict[str, str] = Field(default_factory=dict)
    mapping_files: List[str] = Field(default_factory=list)


class LoggingConfig(BaseModel):
    """Logging settings for the package logger."""

    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class CriteriaResolverConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
