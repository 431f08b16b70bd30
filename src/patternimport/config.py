"""
TOML-based config file loading for patternimport.

Searches for `.patternimport.toml`, `patternimport.toml`, or
`pyproject.toml [tool.patternimport]` walking up from a start directory. Config
values are merged with CLI flags using three-way precedence: explicit CLI flags >
config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

DEFAULT_PATTERN = "*.{png,jpg,jpeg,svg}"


@dataclass
class PatternImportConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    pattern: str | None = None
    # File discovery
    exclude: list[str] | None = None
    extend_exclude: list[str] | None = None
    respect_gitignore: bool | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".patternimport.toml", "patternimport.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(PatternImportConfig)}

# Expected TOML value type per field, for validation of loaded values.
_FIELD_TYPES: dict[str, str] = {
    "pattern": "a string",
    "exclude": "a list of strings",
    "extend_exclude": "a list of strings",
    "respect_gitignore": "a boolean",
}


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def _has_expected_type(field_name: str, value: Any) -> bool:
    expected = _FIELD_TYPES[field_name]
    if expected == "a string":
        return isinstance(value, str)
    if expected == "a boolean":
        return isinstance(value, bool)
    return isinstance(value, list) and all(
        isinstance(item, str) for item in cast(list[Any], value)
    )


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.patternimport.toml` >
    `patternimport.toml` > `pyproject.toml` (only if it has `[tool.patternimport]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.patternimport] section."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return "patternimport" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError):
        return False


def load_config(config_path: Path) -> PatternImportConfig:
    """
    Load a `PatternImportConfig` from a TOML file. Supports both standalone
    `patternimport.toml` / `.patternimport.toml` and `pyproject.toml` (extracts
    `[tool.patternimport]`). An unreadable or malformed file is reported on
    stderr and treated as empty.
    """
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError) as e:
        _warn(f"ignoring unreadable or malformed config file {config_path}: {e}")
        return PatternImportConfig()

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("patternimport", {})

    return _parse_config_data(data, config_path)


def _parse_config_data(data: dict[str, Any], source: Path | None = None) -> PatternImportConfig:
    """Parse a flat or sectioned TOML dict into PatternImportConfig."""
    # Flatten sections: e.g. [discovery] merges into top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        where = f" in {source}" if source else ""
        if snake_key not in _VALID_FIELDS:
            _warn(f"unrecognized config key {key!r}{where}")
        elif not _has_expected_type(snake_key, value):
            _warn(f"ignoring config key {key!r}{where}: expected {_FIELD_TYPES[snake_key]}")
        else:
            mapped[snake_key] = value

    return PatternImportConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: PatternImportConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(PatternImportConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
