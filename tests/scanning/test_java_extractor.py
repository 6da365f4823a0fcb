"""Tests for the tree-sitter Java extractor."""

import textwrap

import pytest

from concurrency_insight.exceptions import ParsingError
from concurrency_insight.scanning.extractor import SourceExtractor
from concurrency_insight.scanning.java import JavaSourceExtractor

CACHE_SOURCE = textwrap.dedent(
    """\
    package com.acme;

    import java.util.HashMap;
    import java.util.concurrent.*;
    import static java.util.Collections.emptyList;

    public class Cache<K, V> extends AbstractCache<K> implements Serializable, java.io.Closeable {
        private final Map<String, List<Integer>> index = new HashMap<>();
        private volatile boolean running;
        private static int a, b;

        public synchronized void put(K key, V value) { }

        public static <T> List<T> copy(List<T> items, int... extra) { return items; }

        int size() { return 0; }

        static class Entry {
            long hits;
        }

        interface Listener extends EventListener {
            int LIMIT = 10;

            void onEvict(String key);
        }
    }
    """
)


@pytest.fixture(scope="module")
def cache_unit():
    return JavaSourceExtractor().extract(CACHE_SOURCE, "com/acme/Cache.java")


class TestJavaImports:
    """Import declarations."""

    def test_imports(self, cache_unit):
        """Wildcards and static imports keep their package or member name."""
        assert cache_unit.imports == frozenset(
            {"java.util.HashMap", "java.util.concurrent", "java.util.Collections.emptyList"}
        )

    def test_thread_related_imports(self, cache_unit):
        assert cache_unit.thread_related_imports == frozenset({"java.util.concurrent"})


class TestJavaClasses:
    """Class and interface declarations."""

    def test_nested_declarations_are_flattened_in_source_order(self, cache_unit):
        assert cache_unit.class_names() == ["Cache", "Entry", "Listener"]

    def test_class_header(self, cache_unit):
        cache = cache_unit.classes[0]
        assert cache.line == 7
        assert cache.is_interface is False
        assert cache.parent_classes == frozenset({"AbstractCache"})
        assert cache.interfaces == frozenset({"Serializable", "Closeable"})

    def test_interface_header(self, cache_unit):
        listener = cache_unit.classes[2]
        assert listener.is_interface is True
        assert listener.parent_classes == frozenset({"EventListener"})

    def test_members_are_not_shared_with_nested_classes(self, cache_unit):
        """Entry.hits belongs to Entry only."""
        cache, entry, _ = cache_unit.classes
        assert [f.name for f in cache.fields] == ["index", "running", "a", "b"]
        assert [f.name for f in entry.fields] == ["hits"]


class TestJavaFields:
    """Field declarations."""

    def test_field_types_and_modifiers(self, cache_unit):
        index, running, a, b = cache_unit.classes[0].fields

        assert index.declared_type == "Map<String, List<Integer>>"
        assert index.is_final and not index.is_volatile and not index.is_static
        assert index.line == 8

        assert running.declared_type == "boolean"
        assert running.is_volatile

        assert a.is_static and b.is_static
        assert a.line == b.line == 10

    def test_interface_constants(self, cache_unit):
        """Interface constants are fields; implicit modifiers are not added."""
        (limit,) = cache_unit.classes[2].fields
        assert limit.name == "LIMIT"
        assert limit.declared_type == "int"
        assert not limit.is_final


class TestJavaMethods:
    """Method declarations."""

    def test_method_signatures(self, cache_unit):
        put, copy, size = cache_unit.classes[0].methods

        assert put.is_synchronized and not put.is_static
        assert put.return_type == "void"
        assert put.parameter_types == ("K", "V")
        assert put.line == 12

        assert copy.is_static
        assert copy.return_type == "List<T>"
        assert copy.parameter_types == ("List<T>", "int...")

        assert size.return_type == "int"
        assert size.parameter_types == ()

    def test_abstract_interface_method(self, cache_unit):
        (on_evict,) = cache_unit.classes[2].methods
        assert on_evict.name == "onEvict"
        assert on_evict.parameter_types == ("String",)


class TestJavaErrors:
    """Syntax errors and edge cases."""

    def test_syntax_error_yields_failed_unit(self, broken_source):
        unit = JavaSourceExtractor().extract(broken_source, "Broken.java")
        assert unit.has_error
        assert unit.classes == ()
        assert unit.parse_error.startswith("syntax error")
        assert unit.content == broken_source

    def test_parse_raises(self, broken_source):
        with pytest.raises(ParsingError) as exc_info:
            JavaSourceExtractor().parse(broken_source, "Broken.java")
        assert exc_info.value.language == "java"

    def test_empty_source(self):
        unit = JavaSourceExtractor().extract("", "Empty.java")
        assert not unit.has_error
        assert unit.classes == ()

    def test_satisfies_extractor_protocol(self):
        assert isinstance(JavaSourceExtractor(), SourceExtractor)

    def test_extractor_is_reusable(self, counter_source, safe_source):
        extractor = JavaSourceExtractor()
        assert extractor.extract(counter_source, "A.java").class_names() == ["Counter"]
        assert extractor.extract(safe_source, "B.java").class_names() == ["Registry"]
