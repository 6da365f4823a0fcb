"""The narrow interface between parsers and the analysis engine.

Analyzers and the engine only ever see ``SourceUnit`` values; anything
that can produce them (tree-sitter, a regex scanner, a fixture builder)
plugs in here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .models import SourceUnit

logger = get_logger(__name__)


@runtime_checkable
class SourceExtractor(Protocol):
    """Turns raw source text into a structural model.

    Parse failures are reported through ``SourceUnit.parse_error``, never
    raised, so one bad file cannot stop a scan.
    """

    language: str

    def extract(self, content: str, path: str) -> SourceUnit: ...


def read_source(filepath: Path) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes."""
    try:
        return filepath.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(filepath, e.strerror or str(e)) from e


def extract_file(
    extractor: SourceExtractor, filepath: Union[str, Path], display_path: str = ""
) -> SourceUnit:
    """Read and extract one file; read failures become a failed unit."""
    filepath = Path(filepath)
    path = display_path or str(filepath)
    try:
        content = read_source(filepath)
    except FileAccessError as e:
        logger.warning(f"Access error for {filepath}: {e.reason}")
        return SourceUnit.failed(path, f"Cannot read file: {e.reason}", language=extractor.language)
    return extractor.extract(content, path)
