"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from criteria_resolver.registry.predicate_registry import CriterionPredicateRegistry
from tests.fixtures.criteria import (
    BrokenCriterion,
    BrokenPredicate,
    Foo,
    FooCriterion,
    FooPredicate,
)


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def mappings_path(fixtures_path: Path) -> Path:
    """Path to sample predicate mapping file."""
    return fixtures_path / "predicate_mappings.yaml"


@pytest.fixture
def registry() -> CriterionPredicateRegistry[Foo]:
    """Registry mapping FooCriterion to FooPredicate."""
    registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()
    registry.register(FooCriterion, FooPredicate)
    return registry


@pytest.fixture
def broken_registry(registry: CriterionPredicateRegistry[Foo]) -> CriterionPredicateRegistry[Foo]:
    """Registry that additionally maps BrokenCriterion to a failing predicate."""
    registry.register(BrokenCriterion, BrokenPredicate)
    return registry


@pytest.fixture
def foos() -> List[Foo]:
    """A few candidates with distinct values."""
    return [Foo(1), Foo(2), Foo(3)]
