"""Named predicates over declared type names, member names and imports.

Types are opaque text ("HashMap<String, List<Foo>>"); every predicate is a
plain substring or equality test on that text. These match sets are the
whole behavioral contract of the analyzers, so they live here, once.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ...scanning.models import FieldDescriptor, MethodDescriptor

# ── Shared mutable state ──────────────────────────────────────────

# Matched anywhere in the type text, so "ConcurrentHashMap" also contains
# "HashMap". Heuristic kept as is.
UNSAFE_CONTAINER_NAMES = ("HashMap", "ArrayList", "HashSet", "TreeMap", "TreeSet", "LinkedList")

_FAMILY_MARKERS = ("Map", "List", "Set")


class ContainerFamily(Enum):
    MAP = "map"
    LIST = "list"
    SET = "set"
    OTHER = "other"


def is_unsafe_container_type(type_name: str) -> bool:
    """Any UNSAFE_CONTAINER_NAMES entry, or Map/List/Set without Concurrent."""
    if any(name in type_name for name in UNSAFE_CONTAINER_NAMES):
        return True
    if "Concurrent" in type_name:
        return False
    return any(marker in type_name for marker in _FAMILY_MARKERS)


def container_family(type_name: str) -> ContainerFamily:
    """Family used to pick remediation text; Map wins over List over Set."""
    if "Map" in type_name:
        return ContainerFamily.MAP
    if "List" in type_name:
        return ContainerFamily.LIST
    if "Set" in type_name:
        return ContainerFamily.SET
    return ContainerFamily.OTHER


def is_shared_mutable_field(f: FieldDescriptor) -> bool:
    return not f.is_final and not f.is_volatile and is_unsafe_container_type(f.declared_type)


# ── Publication ───────────────────────────────────────────────────

_COLLECTION_MARKERS = ("Collection", "Map", "List", "Set", "Queue", "Deque")


def is_collection_like_type(type_name: str) -> bool:
    return any(marker in type_name for marker in _COLLECTION_MARKERS)


def is_unsafely_published(f: FieldDescriptor) -> bool:
    """Static, not final and not volatile; the type does not matter."""
    return f.is_static and not f.is_final and not f.is_volatile


# ── Race conditions ───────────────────────────────────────────────

MUTATOR_PREFIXES = ("set", "add", "remove", "put")


def is_mutation_method(m: MethodDescriptor) -> bool:
    """Signature heuristic: void return type or a mutator-style name."""
    return m.return_type == "void" or m.name.startswith(MUTATOR_PREFIXES)


# ── Concurrent collections ────────────────────────────────────────

SAFE_COLLECTION_NAMES = (
    "ConcurrentHashMap",
    "CopyOnWriteArrayList",
    "CopyOnWriteArraySet",
    "ConcurrentLinkedQueue",
    "ConcurrentLinkedDeque",
    "LinkedBlockingQueue",
    "LinkedBlockingDeque",
    "ArrayBlockingQueue",
    "PriorityBlockingQueue",
    "DelayQueue",
    "SynchronousQueue",
    "LinkedTransferQueue",
    "ConcurrentSkipListMap",
    "ConcurrentSkipListSet",
)

LEGACY_COLLECTION_NAMES = ("Vector", "Hashtable")

SYNCHRONIZED_WRAPPER_MARKER = "Synchronized"

# Checked in this order; first hit wins.
UNSAFE_COLLECTION_NAMES = ("HashMap", "HashSet", "ArrayList", "TreeMap", "TreeSet", "LinkedList")


def is_safe_collection_type(type_name: str) -> bool:
    return any(name in type_name for name in SAFE_COLLECTION_NAMES)


def legacy_collection_name(type_name: str) -> Optional[str]:
    return next((name for name in LEGACY_COLLECTION_NAMES if name in type_name), None)


def is_synchronized_wrapper_type(type_name: str) -> bool:
    """Collections.synchronizedXxx() wrappers, e.g. ``Collections.SynchronizedMap``.

    Only the declared type is inspected. A field declared ``Map<K, V>`` and
    initialized with ``Collections.synchronizedMap(...)`` is not recognized,
    since extracted fields carry no initializer.
    """
    return SYNCHRONIZED_WRAPPER_MARKER in type_name


def unsafe_collection_name(type_name: str) -> Optional[str]:
    return next((name for name in UNSAFE_COLLECTION_NAMES if name in type_name), None)


# ── Executors ─────────────────────────────────────────────────────

EXECUTOR_TYPE_NAMES = ("ExecutorService", "ThreadPoolExecutor")
LIFECYCLE_METHOD_MARKERS = ("shutdown", "close")


def is_executor_import(import_name: str) -> bool:
    return "Executor" in import_name


def is_executor_type(type_name: str) -> bool:
    return any(name in type_name for name in EXECUTOR_TYPE_NAMES)


def is_lifecycle_method(m: MethodDescriptor) -> bool:
    """Names containing shutdown/close, case-insensitive (shutdownNow, onClose)."""
    lowered = m.name.lower()
    return any(marker in lowered for marker in LIFECYCLE_METHOD_MARKERS)


# ── Atomics ───────────────────────────────────────────────────────

COUNTER_TYPES = ("int", "long")
COUNTER_NAME_HINTS = ("count", "index", "size")

_ATOMIC_WRAPPERS = {
    "int": "AtomicInteger",
    "long": "AtomicLong",
}


def is_primitive_counter(f: FieldDescriptor) -> bool:
    """Exactly int/long, with count/index/size in the lowercased name."""
    name = f.name.lower()
    return f.declared_type in COUNTER_TYPES and any(hint in name for hint in COUNTER_NAME_HINTS)


def atomic_wrapper_for(type_name: str) -> Optional[str]:
    return _ATOMIC_WRAPPERS.get(type_name)


# ── Locks ─────────────────────────────────────────────────────────


def is_lock_import(import_name: str) -> bool:
    return "locks" in import_name


def is_lock_type(type_name: str) -> bool:
    return "Lock" in type_name
