"""
Criterion Predicate Registry - Criterion Type to Predicate Type Mappings.

This module provides a thread-safe registry mapping criterion types to
predicate types able to evaluate that criterion's data against a target.

Every registered predicate type MUST accept the criterion instance as its
single constructor argument. A fresh predicate is created per lookup.

Usage:
    registry = CriterionPredicateRegistry()
    registry.register(EntityIdCriterion, EntityIdPredicate)

    # Or from dotted names / a YAML mapping file
    registry.load_mappings({"myapp.criteria.EntityIdCriterion": "myapp.predicates.EntityIdPredicate"})
    registry.load_mappings_file("config/predicate-mappings.yaml")

    predicate = registry.get_predicate(EntityIdCriterion("foo"))
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar, Union

import yaml

from criteria_resolver.domain.exceptions import ResolverError
from criteria_resolver.interfaces.predicate import Predicate

logger = logging.getLogger(__name__)

T = TypeVar("T")


def import_by_name(name: str) -> Any:
    """
    Import an object from a dotted path.

    Accepts both "package.module:Name" and "package.module.Name".

    Raises:
        ImportError: If the module or attribute cannot be found
    """
    if ":" in name:
        module_name, _, attr_path = name.partition(":")
    else:
        module_name, _, attr_path = name.rpartition(".")
    if not module_name or not attr_path:
        raise ImportError(f"'{name}' is not a valid dotted path")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ImportError(f"'{module_name}' has no attribute '{attr_path}'") from e
    return obj


class CriterionPredicateRegistry(Generic[T]):
    """
    Thread-safe registry of criterion type -> predicate type mappings.

    Lookups match the exact criterion type; subclasses of a registered
    criterion type need their own mapping.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._registry: Dict[type, Type[Predicate[T]]] = {}
        self._lock = RLock()
        logger.debug("CriterionPredicateRegistry initialized")

    def get_predicate(self, criterion: Any) -> Optional[Predicate[T]]:
        """
        Get a predicate which evaluates the criterion's requirements.

        Args:
            criterion: Criterion to be evaluated

        Returns:
            New predicate instance, or None if no predicate type is registered
            for the criterion's type

        Raises:
            ValueError: If criterion is None
            ResolverError: If the predicate type cannot be instantiated
        """
        if criterion is None:
            raise ValueError("Criterion to map cannot be None")

        criterion_type = type(criterion)
        predicate_type = self.lookup(criterion_type)

        if predicate_type is None:
            logger.debug(
                f"Registry did not locate Predicate implementation registered "
                f"for Criterion type {criterion_type.__qualname__}"
            )
            return None

        logger.debug(
            f"Registry located Predicate type {predicate_type.__qualname__} "
            f"for Criterion type {criterion_type.__qualname__}"
        )
        try:
            return predicate_type(criterion)
        except Exception as e:
            logger.error(
                f"Error instantiating Predicate {predicate_type.__qualname__}: {e}"
            )
            raise ResolverError("Could not create new Predicate instance") from e

    def lookup(self, criterion_type: type) -> Optional[Type[Predicate[T]]]:
        """
        Look up the predicate type registered for a criterion type.

        Args:
            criterion_type: Criterion type to look up

        Returns:
            Registered predicate type or None
        """
        if criterion_type is None:
            raise ValueError("Criterion type to lookup cannot be None")
        with self._lock:
            return self._registry.get(criterion_type)

    def register(
        self,
        criterion_type: type,
        predicate_type: Type[Predicate[T]],
    ) -> None:
        """
        Register a predicate type for a criterion type.

        An existing mapping for the criterion type is replaced.

        Args:
            criterion_type: Criterion type
            predicate_type: Predicate type constructed from the criterion
        """
        if criterion_type is None:
            raise ValueError("Criterion type to register cannot be None")
        if predicate_type is None:
            raise ValueError("Predicate type to register cannot be None")

        with self._lock:
            self._registry[criterion_type] = predicate_type
            logger.debug(
                f"Registering {predicate_type.__qualname__} as Predicate "
                f"for Criterion type {criterion_type.__qualname__}"
            )

    def deregister(self, criterion_type: type) -> bool:
        """
        Remove the mapping for a criterion type.

        Returns:
            True if a mapping was removed, False if none existed
        """
        if criterion_type is None:
            raise ValueError("Criterion type to deregister cannot be None")

        with self._lock:
            if criterion_type not in self._registry:
                return False
            del self._registry[criterion_type]
            logger.debug(
                f"Deregistering Predicate for Criterion type {criterion_type.__qualname__}"
            )
            return True

    def clear(self) -> None:
        """Remove all mappings from the registry."""
        with self._lock:
            self._registry.clear()
            logger.debug("Clearing Criterion Predicate registry")

    def load_mappings(self, mappings: Mapping[Any, Any]) -> int:
        """
        Load mappings from dotted criterion names to dotted predicate names.

        Entries that cannot be resolved are logged and skipped.

        Args:
            mappings: Criterion type name -> predicate type name

        Returns:
            Number of mappings registered
        """
        if mappings is None:
            raise ValueError("Mappings to load cannot be None")

        loaded = 0
        for criterion_name, predicate_name in mappings.items():
            if not isinstance(criterion_name, str) or not isinstance(predicate_name, str):
                logger.error(
                    f"Mapping entry was not a pair of strings, was "
                    f"'{type(criterion_name).__name__}' -> '{type(predicate_name).__name__}', "
                    f"skipping..."
                )
                continue

            try:
                criterion_type = import_by_name(criterion_name)
            except ImportError:
                logger.error(
                    f"Could not find Criterion type '{criterion_name}', skipping registration"
                )
                continue

            try:
                predicate_type = import_by_name(predicate_name)
            except ImportError:
                logger.error(
                    f"Could not find Predicate type '{predicate_name}', skipping registration"
                )
                continue

            self.register(criterion_type, predicate_type)
            loaded += 1

        return loaded

    def load_mappings_file(self, path: Union[str, Path]) -> int:
        """
        Load mappings from a YAML file of criterion name -> predicate name.

        A missing or malformed file is logged and leaves the registry
        unchanged.

        Args:
            path: Path to the YAML mapping file

        Returns:
            Number of mappings registered
        """
        if path is None or not str(path).strip():
            raise ValueError("Mapping file path was None or empty")

        mapping_path = Path(path)
        if not mapping_path.is_file():
            logger.error(f"Could not open mapping file '{mapping_path}'")
            return 0

        try:
            with open(mapping_path, encoding="utf-8") as f:
                mappings = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading mappings from file '{mapping_path}': {e}")
            return 0

        if not isinstance(mappings, dict):
            logger.error(f"Mapping file '{mapping_path}' does not contain a mapping")
            return 0

        return self.load_mappings(mappings)

    def list_all(self) -> Dict[type, Type[Predicate[T]]]:
        """Snapshot of all registered mappings."""
        with self._lock:
            return dict(self._registry)

    @property
    def registered_count(self) -> int:
        """Number of registered mappings."""
        with self._lock:
            return len(self._registry)
