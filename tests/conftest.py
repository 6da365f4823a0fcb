"""Shared test fixtures for Concurrency Insight tests."""

import textwrap

import pytest

from concurrency_insight.scanning.models import (
    ClassDescriptor,
    FieldDescriptor,
    MethodDescriptor,
    SourceUnit,
    unit_from_classes,
)


@pytest.fixture
def make_unit():
    """Factory: wrap descriptors into a SourceUnit."""

    def _make(*classes, imports=(), content="", path="Test.java"):
        return unit_from_classes(path, classes, imports=imports, content=content)

    return _make


@pytest.fixture
def empty_class():
    """A class with no fields and no methods."""
    return ClassDescriptor(name="Empty", line=1)


@pytest.fixture
def counter_class():
    """The classic unsafe counter: shared map, mutator and primitive count."""
    return ClassDescriptor(
        name="Counter",
        line=5,
        fields=(
            FieldDescriptor("cache", "HashMap<String, Integer>", line=6),
            FieldDescriptor("count", "int", line=7),
        ),
        methods=(
            MethodDescriptor("increment", return_type="void", line=9),
            MethodDescriptor("getCount", return_type="int", line=13),
        ),
    )


@pytest.fixture
def clean_class():
    """A class no analyzer should object to."""
    return ClassDescriptor(
        name="Clean",
        line=3,
        fields=(
            FieldDescriptor("name", "String", is_final=True, line=4),
            FieldDescriptor("registry", "ConcurrentMap<String, String>", is_final=True, line=5),
        ),
        methods=(MethodDescriptor("getName", return_type="String", line=7),),
    )


@pytest.fixture
def broken_unit():
    """A unit the extractor could not model."""
    return SourceUnit.failed("Broken.java", "syntax error near line 3")


COUNTER_SOURCE = textwrap.dedent(
    """\
    package com.acme;

    import java.util.HashMap;
    import java.util.Map;
    import java.util.concurrent.ExecutorService;
    import java.util.concurrent.Executors;

    public class Counter {
        private Map<String, Integer> cache = new HashMap<>();
        private int count;
        private static int instanceCount;
        private final ExecutorService pool = Executors.newFixedThreadPool(2);

        public void increment() {
            count++;
        }

        public int getCount() {
            return count;
        }
    }
    """
)

SAFE_SOURCE = textwrap.dedent(
    """\
    package com.acme;

    import java.util.concurrent.ConcurrentHashMap;

    public final class Registry {
        private final ConcurrentHashMap<String, String> entries = new ConcurrentHashMap<>();

        public String lookup(String key) {
            return entries.get(key);
        }
    }
    """
)

BROKEN_SOURCE = "public class Broken {\n    private int x\n    void f( {\n}\n"


@pytest.fixture
def counter_source():
    return COUNTER_SOURCE


@pytest.fixture
def safe_source():
    return SAFE_SOURCE


@pytest.fixture
def broken_source():
    return BROKEN_SOURCE


@pytest.fixture
def java_project(tmp_path):
    """A small on-disk project: one unsafe file, one safe file, one broken file."""
    src = tmp_path / "src" / "main" / "java" / "com" / "acme"
    src.mkdir(parents=True)
    (src / "Counter.java").write_text(COUNTER_SOURCE)
    (src / "Registry.java").write_text(SAFE_SOURCE)
    (src / "Broken.java").write_text(BROKEN_SOURCE)
    (tmp_path / "README.md").write_text("not java\n")
    return tmp_path
