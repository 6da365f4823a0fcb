"""Tests for the type and name predicates."""

import pytest

from concurrency_insight.insights.analyzers.predicates import (
    COUNTER_TYPES,
    ContainerFamily,
    atomic_wrapper_for,
    container_family,
    is_collection_like_type,
    is_executor_type,
    is_lifecycle_method,
    is_mutation_method,
    is_primitive_counter,
    is_safe_collection_type,
    is_synchronized_wrapper_type,
    is_unsafe_container_type,
    legacy_collection_name,
    unsafe_collection_name,
)
from concurrency_insight.scanning.models import FieldDescriptor, MethodDescriptor


class TestContainerPredicates:
    """Unsafe container matching on opaque type text."""

    @pytest.mark.parametrize(
        "type_name, expected",
        [
            ("HashMap<String, String>", True),
            ("Map<String, String>", True),
            ("List<String>", True),
            ("Set<String>", True),
            ("ConcurrentMap<String, String>", False),
            ("ConcurrentHashMap<String, String>", True),
            ("String", False),
            ("int", False),
        ],
    )
    def test_is_unsafe_container_type(self, type_name, expected):
        assert is_unsafe_container_type(type_name) is expected

    def test_container_family_priority(self):
        """Map wins over List, List over Set."""
        assert container_family("Map<String, List<String>>") is ContainerFamily.MAP
        assert container_family("List<Set<String>>") is ContainerFamily.LIST
        assert container_family("Set<String>") is ContainerFamily.SET
        assert container_family("Queue<String>") is ContainerFamily.OTHER

    def test_collection_like_type(self):
        assert is_collection_like_type("Deque<String>")
        assert is_collection_like_type("Collection<String>")
        assert not is_collection_like_type("String")


class TestCollectionNames:
    """Safe, legacy and unsafe collection lookups."""

    def test_first_unsafe_name_wins(self):
        """HashMap is checked before ArrayList."""
        assert unsafe_collection_name("ArrayList<HashMap<K, V>>") == "HashMap"

    def test_no_unsafe_name(self):
        assert unsafe_collection_name("Queue<String>") is None

    def test_legacy_names(self):
        assert legacy_collection_name("Vector<String>") == "Vector"
        assert legacy_collection_name("Hashtable<K, V>") == "Hashtable"
        assert legacy_collection_name("HashMap<K, V>") is None

    def test_safe_collection_names(self):
        assert is_safe_collection_type("CopyOnWriteArraySet<String>")
        assert not is_safe_collection_type("HashSet<String>")

    def test_synchronized_wrapper_needs_wrapper_in_declared_type(self):
        """Only the declared type is seen, never the initializer."""
        assert is_synchronized_wrapper_type("Collections.SynchronizedMap<K, V>")
        assert not is_synchronized_wrapper_type("Map<K, V>")


class TestMemberPredicates:
    """Method and field heuristics."""

    @pytest.mark.parametrize(
        "method, expected",
        [
            (MethodDescriptor("run", return_type="void"), True),
            (MethodDescriptor("setName", return_type="Builder"), True),
            (MethodDescriptor("size", return_type="int"), False),
        ],
    )
    def test_is_mutation_method(self, method, expected):
        assert is_mutation_method(method) is expected

    @pytest.mark.parametrize("name", ["shutdown", "shutdownNow", "close", "onClose", "SHUTDOWN"])
    def test_is_lifecycle_method(self, name):
        assert is_lifecycle_method(MethodDescriptor(name))

    def test_is_primitive_counter_requires_exact_type(self):
        assert is_primitive_counter(FieldDescriptor("retryCount", "int"))
        assert not is_primitive_counter(FieldDescriptor("retryCount", "int[]"))

    def test_atomic_wrapper_for(self):
        assert atomic_wrapper_for("long") == "AtomicLong"
        assert atomic_wrapper_for("double") is None

    def test_wrappers_cover_exactly_the_counter_types(self):
        assert all(atomic_wrapper_for(t) for t in COUNTER_TYPES)
        assert atomic_wrapper_for("boolean") is None

    def test_is_executor_type(self):
        assert is_executor_type("ScheduledExecutorService")
        assert not is_executor_type("Executor")
