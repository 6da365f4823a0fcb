"""Structural model of analyzed source: units, classes, fields, methods.

These descriptors are produced by an extractor and consumed read-only by
the analyzers. All of them are frozen; sequence attributes are stored as
tuples and name sets as frozensets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

# Import prefixes that mark an import as thread-related.
THREAD_RELATED_IMPORT_PREFIXES = (
    "java.util.concurrent",
    "java.lang.Thread",
    "java.util.concurrent.atomic",
    "java.util.concurrent.locks",
    "java.util.concurrent.Executor",
    "java.util.concurrent.Future",
    "java.util.concurrent.CompletableFuture",
)


def _freeze(obj: object, name: str, factory: type) -> None:
    value = getattr(obj, name)
    if not isinstance(value, factory):
        object.__setattr__(obj, name, factory(value))


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    declared_type: str  # opaque text, generics included: "Map<String, List<Foo>>"
    is_final: bool = False
    is_volatile: bool = False
    is_static: bool = False
    line: int = 0  # 1-based, 0 = unknown


@dataclass(frozen=True)
class MethodDescriptor:
    name: str
    return_type: str = "void"
    is_synchronized: bool = False
    is_static: bool = False
    parameter_types: tuple[str, ...] = ()
    line: int = 0

    def __post_init__(self) -> None:
        _freeze(self, "parameter_types", tuple)


@dataclass(frozen=True)
class ClassDescriptor:
    """One class or interface declaration, flattened out of any nesting."""

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    methods: tuple[MethodDescriptor, ...] = ()
    parent_classes: frozenset[str] = frozenset()
    interfaces: frozenset[str] = frozenset()
    is_interface: bool = False
    line: int = 0

    def __post_init__(self) -> None:
        _freeze(self, "fields", tuple)
        _freeze(self, "methods", tuple)
        _freeze(self, "parent_classes", frozenset)
        _freeze(self, "interfaces", frozenset)

    @property
    def synchronized_methods(self) -> tuple[MethodDescriptor, ...]:
        return tuple(m for m in self.methods if m.is_synchronized)


@dataclass(frozen=True)
class SourceUnit:
    """Extracted structural model of one source file.

    ``parse_error`` is set when the extractor could not model the file;
    such a unit carries no classes and is reported as a failed result.
    """

    path: str
    content: str = ""
    imports: frozenset[str] = frozenset()
    classes: tuple[ClassDescriptor, ...] = ()
    parse_error: Optional[str] = None
    language: str = "java"

    def __post_init__(self) -> None:
        _freeze(self, "imports", frozenset)
        _freeze(self, "classes", tuple)

    @classmethod
    def failed(
        cls, path: str, message: str, content: str = "", language: str = "java"
    ) -> SourceUnit:
        return cls(
            path=path, content=content, parse_error=message or "unknown error", language=language
        )

    @property
    def has_error(self) -> bool:
        return self.parse_error is not None

    @property
    def thread_related_imports(self) -> frozenset[str]:
        """Imports that belong to the threading and concurrency packages."""
        return frozenset(
            imp
            for imp in self.imports
            if any(imp.startswith(prefix) for prefix in THREAD_RELATED_IMPORT_PREFIXES)
        )

    @property
    def total_lines(self) -> int:
        return len(self.content.splitlines())

    def class_names(self) -> list[str]:
        return [c.name for c in self.classes]


def unit_from_classes(
    path: str,
    classes: Iterable[ClassDescriptor],
    imports: Iterable[str] = (),
    content: str = "",
) -> SourceUnit:
    """Build a unit directly from descriptors (for callers with their own parser)."""
    return SourceUnit(
        path=path,
        content=content,
        imports=frozenset(imports),
        classes=tuple(classes),
    )


__all__ = [
    "THREAD_RELATED_IMPORT_PREFIXES",
    "FieldDescriptor",
    "MethodDescriptor",
    "ClassDescriptor",
    "SourceUnit",
    "unit_from_classes",
]
