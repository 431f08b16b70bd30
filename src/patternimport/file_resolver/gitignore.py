"""Gitignore and tool-specific ignore file handling using pathspec."""

from __future__ import annotations

from pathlib import Path

import pathspec


def _read_ignore_file(path: Path) -> pathspec.PathSpec | None:
    """
    Compile an ignore file into a `PathSpec`. Missing, unreadable, non-UTF-8, or
    effectively empty files all yield `None`.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    lines = [line for line in text.splitlines() if line.strip() and not line.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)


def load_gitignore(directory: Path) -> pathspec.PathSpec | None:
    """Read `.gitignore` in the given directory, if any."""
    return _read_ignore_file(directory / ".gitignore")


def load_tool_ignore(tool_name: str, start_dir: Path) -> pathspec.PathSpec | None:
    """
    Walk up from `start_dir` looking for `.{tool_name}ignore` (e.g., `.patternimportignore`).
    Returns compiled `PathSpec` from first found, or `None`.
    """
    ignore_name = f".{tool_name}ignore"
    current = start_dir.resolve()
    while True:
        candidate = current / ignore_name
        if candidate.is_file():
            return _read_ignore_file(candidate)
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
