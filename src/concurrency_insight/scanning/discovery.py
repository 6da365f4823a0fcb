"""Find the Java source files under a root directory."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..exceptions import InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)

JAVA_SUFFIX = ".java"

_GLOB_CHARS = set("*?[/")


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def should_exclude(relative: Path, exclude_patterns: list[str]) -> bool:
    """Glob patterns match the relative path; plain words match the file name.

    ``"target/*"`` excludes ``target/Foo.java``; ``"backup"`` excludes
    ``BackupFile.java`` (case-insensitive).
    """
    posix = relative.as_posix()
    name = relative.name.lower()
    for pattern in exclude_patterns:
        if _GLOB_CHARS.intersection(pattern):
            if fnmatch(posix, pattern) or relative.match(pattern):
                return True
        elif pattern and pattern.lower() in name:
            return True
    return False


def discover_java_files(
    root: Union[str, Path], config: Optional[AnalysisConfig] = None
) -> list[Path]:
    """Return the ``*.java`` files under ``root``, sorted.

    A ``root`` that is itself a Java file is returned as the only entry.

    Raises:
        InvalidPathError: If ``root`` does not exist
    """
    config = config or DEFAULT_CONFIG
    root = Path(root)

    if not root.exists():
        raise InvalidPathError(root, "Path does not exist")
    if root.is_file():
        if root.suffix != JAVA_SUFFIX:
            raise InvalidPathError(root, "Not a Java source file")
        return [root]

    found: list[Path] = []
    skipped = 0
    try:
        candidates = sorted(root.rglob(f"*{JAVA_SUFFIX}"))
    except RecursionError:
        logger.error("Symlink loop detected during directory traversal")
        return found

    for filepath in candidates:
        if not filepath.is_file():
            continue

        relative = filepath.relative_to(root)
        if not config.allow_hidden_files and _is_hidden(relative):
            skipped += 1
            continue

        if should_exclude(relative, config.exclude_patterns):
            skipped += 1
            logger.debug(f"Skipped (pattern): {relative}")
            continue

        try:
            size = filepath.stat().st_size
        except OSError as e:
            logger.warning(f"Cannot stat {filepath}: {e}")
            continue
        if size > config.max_file_size_bytes:
            skipped += 1
            logger.debug(f"Skipped (size): {filepath} ({size} bytes)")
            continue

        if len(found) >= config.max_files:
            logger.warning(f"Reached max files limit ({config.max_files})")
            break
        found.append(filepath)

    logger.info(f"Discovered {len(found)} Java file(s) under {root} ({skipped} skipped)")
    return found
