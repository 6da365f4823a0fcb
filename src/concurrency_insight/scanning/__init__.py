"""Source discovery and structural extraction."""

from .discovery import discover_java_files, should_exclude
from .extractor import SourceExtractor, extract_file, read_source
from .models import (
    THREAD_RELATED_IMPORT_PREFIXES,
    ClassDescriptor,
    FieldDescriptor,
    MethodDescriptor,
    SourceUnit,
    unit_from_classes,
)

__all__ = [
    "THREAD_RELATED_IMPORT_PREFIXES",
    "ClassDescriptor",
    "FieldDescriptor",
    "MethodDescriptor",
    "SourceExtractor",
    "SourceUnit",
    "discover_java_files",
    "extract_file",
    "read_source",
    "should_exclude",
    "unit_from_classes",
]
