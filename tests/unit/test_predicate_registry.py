"""
Unit Tests for CriterionPredicateRegistry.

Tests:
    - Explicit register / deregister / clear
    - Predicate instantiation and failure translation
    - Loading mappings from dotted names and YAML files
    - Thread-safety of registration
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import pytest

from criteria_resolver.domain.exceptions import ResolverError
from criteria_resolver.registry.predicate_registry import (
    CriterionPredicateRegistry,
    import_by_name,
)
from tests.fixtures.criteria import (
    BrokenCriterion,
    BrokenPredicate,
    Foo,
    FooCriterion,
    FooPredicate,
    UnmappedCriterion,
)


class TestRegistration:
    """Tests for explicit registration."""

    def test_register_deregister(self) -> None:
        """
        SCENARIO: Register, deregister, register again then clear
        EXPECTED: Predicate available only while mapped
        """
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()
        criterion = FooCriterion()

        assert registry.get_predicate(criterion) is None

        registry.register(FooCriterion, FooPredicate)
        predicate = registry.get_predicate(criterion)
        assert isinstance(predicate, FooPredicate)
        assert predicate.criterion is criterion

        assert registry.deregister(FooCriterion) is True
        assert registry.get_predicate(criterion) is None
        assert registry.deregister(FooCriterion) is False

        registry.register(FooCriterion, FooPredicate)
        assert registry.get_predicate(criterion) is not None

        registry.clear()
        assert registry.get_predicate(criterion) is None
        assert registry.registered_count == 0

    def test_fresh_predicate_per_lookup(self, registry: CriterionPredicateRegistry[Foo]) -> None:
        """
        SCENARIO: Same criterion looked up twice
        EXPECTED: Two distinct predicate instances
        """
        criterion = FooCriterion()

        first = registry.get_predicate(criterion)
        second = registry.get_predicate(criterion)

        assert first is not second

    def test_lookup_is_exact_type(self, registry: CriterionPredicateRegistry[Foo]) -> None:
        """
        SCENARIO: Criterion subclass of a mapped type
        EXPECTED: Not mapped
        """

        class SubFooCriterion(FooCriterion):
            pass

        assert registry.lookup(FooCriterion) is FooPredicate
        assert registry.get_predicate(SubFooCriterion()) is None

    def test_none_arguments_raise(self, registry: CriterionPredicateRegistry[Foo]) -> None:
        """
        SCENARIO: None criterion or type passed
        EXPECTED: ValueError
        """
        with pytest.raises(ValueError):
            registry.get_predicate(None)
        with pytest.raises(ValueError):
            registry.register(None, FooPredicate)
        with pytest.raises(ValueError):
            registry.register(FooCriterion, None)

    def test_list_all_is_snapshot(self, registry: CriterionPredicateRegistry[Foo]) -> None:
        """
        SCENARIO: Mutate the dict returned by list_all
        EXPECTED: Registry unaffected
        """
        mappings = registry.list_all()
        mappings.clear()

        assert registry.registered_count == 1


class TestPredicateInstantiation:
    """Tests for predicate creation failures."""

    def test_constructor_failure_raises_resolver_error(
        self, broken_registry: CriterionPredicateRegistry[Foo]
    ) -> None:
        """
        SCENARIO: Registered predicate constructor raises
        EXPECTED: ResolverError chained from the original exception
        """
        with pytest.raises(ResolverError) as exc_info:
            broken_registry.get_predicate(BrokenCriterion())

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_incompatible_constructor_raises_resolver_error(self) -> None:
        """
        SCENARIO: Predicate type without a single-argument constructor
        EXPECTED: ResolverError
        """

        class NoArgPredicate:
            def __init__(self) -> None:
                pass

            def evaluate(self, candidate: Foo) -> bool:
                return True

        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()
        registry.register(FooCriterion, NoArgPredicate)

        with pytest.raises(ResolverError):
            registry.get_predicate(FooCriterion())


class TestLoadMappings:
    """Tests for loading mappings by name."""

    def test_load_from_dict(self) -> None:
        """
        SCENARIO: Mapping of dotted names in both accepted forms
        EXPECTED: Both mappings registered
        """
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()

        loaded = registry.load_mappings({
            "tests.fixtures.criteria:FooCriterion": "tests.fixtures.criteria:FooPredicate",
            "tests.fixtures.criteria.BrokenCriterion": "tests.fixtures.criteria.BrokenPredicate",
        })

        assert loaded == 2
        assert registry.lookup(FooCriterion) is FooPredicate
        assert registry.lookup(BrokenCriterion) is BrokenPredicate

    def test_unresolvable_entries_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """
        SCENARIO: Unknown criterion, unknown predicate and non-string key
        EXPECTED: Entries skipped with error logs, valid entry registered
        """
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()

        with caplog.at_level(logging.ERROR):
            loaded = registry.load_mappings({
                "tests.fixtures.criteria:NoSuchCriterion": "tests.fixtures.criteria:FooPredicate",
                "tests.fixtures.criteria:FooCriterion": "no.such.module:Predicate",
                42: "tests.fixtures.criteria:FooPredicate",
                "tests.fixtures.criteria:BrokenCriterion": "tests.fixtures.criteria:BrokenPredicate",
            })

        assert loaded == 1
        assert registry.registered_count == 1
        assert registry.lookup(FooCriterion) is None
        assert "Could not find Criterion type" in caplog.text
        assert "Could not find Predicate type" in caplog.text

    def test_load_from_yaml_file(self, mappings_path: Path) -> None:
        """
        SCENARIO: YAML mapping file fixture
        EXPECTED: FooCriterion mapped to FooPredicate
        """
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()

        loaded = registry.load_mappings_file(mappings_path)

        assert loaded == 1
        assert isinstance(registry.get_predicate(FooCriterion()), FooPredicate)

    def test_missing_file_logs_error(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """
        SCENARIO: Mapping file does not exist
        EXPECTED: No exception, nothing registered, error logged
        """
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()

        with caplog.at_level(logging.ERROR):
            loaded = registry.load_mappings_file(tmp_path / "missing.yaml")

        assert loaded == 0
        assert registry.registered_count == 0
        assert "Could not open mapping file" in caplog.text

    def test_non_mapping_file_ignored(self, tmp_path: Path) -> None:
        """
        SCENARIO: YAML file containing a list
        EXPECTED: Nothing registered
        """
        mapping_file = tmp_path / "mappings.yaml"
        mapping_file.write_text("- not\n- a mapping\n")
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()

        assert registry.load_mappings_file(mapping_file) == 0

    def test_invalid_yaml_ignored(self, tmp_path: Path) -> None:
        """
        SCENARIO: File that is not valid YAML
        EXPECTED: Nothing registered, no exception
        """
        mapping_file = tmp_path / "mappings.yaml"
        mapping_file.write_text("key: [unclosed\n")
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()

        assert registry.load_mappings_file(mapping_file) == 0

    def test_empty_path_raises(self) -> None:
        """
        SCENARIO: Blank mapping file path
        EXPECTED: ValueError
        """
        with pytest.raises(ValueError):
            CriterionPredicateRegistry().load_mappings_file("  ")


class TestImportByName:
    """Tests for dotted name resolution."""

    def test_colon_and_dot_forms(self) -> None:
        assert import_by_name("tests.fixtures.criteria:Foo") is Foo
        assert import_by_name("tests.fixtures.criteria.Foo") is Foo

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(ImportError):
            import_by_name("Foo")
        with pytest.raises(ImportError):
            import_by_name("tests.fixtures.criteria:Missing")


class TestThreadSafety:
    """Tests for concurrent registration."""

    def test_concurrent_register(self) -> None:
        """
        SCENARIO: Many threads register distinct criterion types
        EXPECTED: All mappings present
        """
        registry: CriterionPredicateRegistry[Foo] = CriterionPredicateRegistry()
        criterion_types = [type(f"Criterion{i}", (), {}) for i in range(50)]

        def register(criterion_type: type) -> None:
            registry.register(criterion_type, FooPredicate)

        threads = [
            threading.Thread(target=register, args=(t,)) for t in criterion_types
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.registered_count == 50
        assert registry.get_predicate(UnmappedCriterion()) is None
