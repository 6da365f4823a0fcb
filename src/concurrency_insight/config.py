"""Configuration loading and management for Concurrency Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.concurrency-insight.toml)
    3. Project config (./concurrency-insight.toml)
    4. Explicit config file
    5. Environment variables (CONCURRENCY_INSIGHT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=2)
    >>> config.workers
    2
    >>> config.synchronized_method_threshold
    3
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_args, get_origin, get_type_hints

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

CONFIG_FILE_NAME = "concurrency-insight.toml"
ENV_PREFIX = "CONCURRENCY_INSIGHT_"

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a scan.

    Attributes:
        Engine:
            workers: Parallel workers for unit analysis (None = auto-detect)
            deadline_seconds: Stop dispatching new units after this long
                (None = no deadline)

        Analyzer tuning:
            synchronized_method_threshold: A class with more synchronized
                methods than this is reported as a deadlock risk

        File discovery:
            exclude_patterns: Glob patterns (relative path) or name fragments
                to exclude
            max_file_size_mb: Maximum file size to analyze (MB)
            max_files: Maximum number of files to analyze
            allow_hidden_files: Include hidden files and directories

        Output control:
            verbosity: Logging verbosity level
    """

    # Engine
    workers: Optional[int] = None
    deadline_seconds: Optional[float] = None

    # Analyzer tuning
    synchronized_method_threshold: int = 3

    # File discovery
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "build/*",
            "target/*",
            "out/*",
            ".gradle/*",
            ".idea/*",
            "node_modules/*",
            "*/generated/*",
        ]
    )
    max_file_size_mb: float = 5.0
    max_files: int = 10000
    allow_hidden_files: bool = False

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.deadline_seconds is not None and self.deadline_seconds <= 0:
            raise InvalidConfigError("deadline_seconds", self.deadline_seconds, "must be positive")

        if self.synchronized_method_threshold < 0:
            raise InvalidConfigError(
                "synchronized_method_threshold",
                self.synchronized_method_threshold,
                "must be non-negative",
            )

        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")

        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def effective_workers(self) -> int:
        """Worker count with auto-detection resolved."""
        if self.workers is not None:
            return self.workers
        return min(8, os.cpu_count() or 1)


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or has
            unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global"))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError("Config file not found", source=config_file)
        merged.update(_read_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, kind: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid {kind} config: {e}", source=path)

    # Accept either a flat file or a [concurrency-insight] table
    section = data.get("concurrency-insight", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid {kind} config: expected a table", source=path)
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Read ``CONCURRENCY_INSIGHT_<FIELD>`` variables.

    Every field can be set this way. Booleans accept true/false/yes/no/on/off/1/0,
    ``EXCLUDE_PATTERNS`` is comma-separated, and an empty ``WORKERS`` or
    ``DEADLINE_SECONDS`` means "unset" (auto-detect, no deadline).
    """
    type_hints = get_type_hints(AnalysisConfig)
    result: dict[str, Any] = {}

    for config_field in fields(AnalysisConfig):
        env_key = f"{ENV_PREFIX}{config_field.name.upper()}"
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            hint = type_hints[config_field.name]
            result[config_field.name] = _parse_env_value(raw.strip(), hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, raw, str(e), source="environment")

    return result


_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


def _parse_bool(value: str) -> bool:
    lower = value.lower()
    if lower in _TRUE_WORDS:
        return True
    if lower in _FALSE_WORDS:
        return False
    raise ValueError(f"expected one of {', '.join(_TRUE_WORDS + _FALSE_WORDS)}")


def _parse_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Convert one variable to the field's declared type.

    Raises:
        ValueError: If the text does not parse as that type
    """
    args = get_args(type_hint)
    if get_origin(type_hint) is Union and type(None) in args:
        if not value:
            return None
        type_hint = next(arg for arg in args if arg is not type(None))

    if get_origin(type_hint) is list:
        return _parse_list(value)
    if type_hint is bool:
        return _parse_bool(value)
    if type_hint in (int, float):
        return type_hint(value)
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)
