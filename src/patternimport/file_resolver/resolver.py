"""
FileResolver — main entry point for file discovery.

Resolves a glob pattern relative to a base directory into a deduplicated,
sorted list of absolute file paths, applying all configured filters.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pathspec

from patternimport.file_resolver.gitignore import load_gitignore, load_tool_ignore
from patternimport.file_resolver.patterns import expand_braces
from patternimport.file_resolver.types import FileResolverConfig


class FileResolver:
    """
    Finds files matching a glob pattern under a base directory while respecting
    gitignore, tool-specific ignore files, and default/custom exclusions.
    """

    def __init__(self, config: FileResolverConfig) -> None:
        self._config: FileResolverConfig = config
        self._exclude_spec: pathspec.PathSpec = pathspec.PathSpec.from_lines(
            "gitignore", config.effective_exclude
        )
        # Cache gitignore specs per directory to avoid re-reading from disk.
        self._gitignore_cache: dict[Path, pathspec.PathSpec | None] = {}

    def find_files(self, base_dir: str | Path, pattern: str) -> list[Path]:
        """
        Find files under `base_dir` matching `pattern`.

        The pattern is relative to `base_dir` and may use `*`, `?`, `[...]`,
        `**` and `{a,b}` alternation. Directories are never returned.
        Raises `FileNotFoundError` if `base_dir` is not a directory and
        `ValueError` for an empty pattern.
        """
        base = Path(base_dir)
        if not base.is_dir():
            raise FileNotFoundError(f"Directory not found: {base_dir}")
        if not pattern.strip():
            raise ValueError("Empty file pattern")

        root = base.resolve()
        tool_ignore = load_tool_ignore(self._config.tool_name, root)

        seen: set[Path] = set()
        result: list[Path] = []
        for expanded in expand_braces(pattern):
            for found in self._expand_glob(root, expanded):
                # Symlinks are reported at their own location, not their target.
                if found in seen:
                    continue
                seen.add(found)
                if not self._is_excluded(found.relative_to(root), root, tool_ignore):
                    result.append(found)

        result.sort()
        return result

    def _expand_glob(self, root: Path, pattern: str) -> Iterable[Path]:
        """Expand one (brace-free) pattern relative to `root`, yielding files only."""
        glob_part = pattern.replace("\\", "/")
        while glob_part.startswith("./"):
            glob_part = glob_part[2:]
        glob_part = glob_part.lstrip("/")
        if not glob_part:
            return
        for path in root.glob(glob_part):
            if path.is_file():
                yield path

    def _is_excluded(
        self, rel_path: Path, root: Path, tool_ignore: pathspec.PathSpec | None
    ) -> bool:
        """Check a file (relative to `root`) against all exclusion sources."""
        rel_posix = rel_path.as_posix()

        if self._exclude_spec.match_file(rel_posix):
            return True
        if tool_ignore and tool_ignore.match_file(rel_posix):
            return True

        if self._config.respect_gitignore:
            # Each .gitignore applies to paths relative to its own directory.
            directory = root
            remaining = rel_path.parts
            while True:
                spec = self._get_gitignore(directory)
                if spec is not None and spec.match_file("/".join(remaining)):
                    return True
                if len(remaining) <= 1:
                    break
                directory = directory / remaining[0]
                remaining = remaining[1:]

        return False

    def _get_gitignore(self, directory: Path) -> pathspec.PathSpec | None:
        """Load and cache gitignore for a directory."""
        if directory not in self._gitignore_cache:
            self._gitignore_cache[directory] = load_gitignore(directory)
        return self._gitignore_cache[directory]
