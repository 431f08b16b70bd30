"""
Collection of per-file naming records from already-resolved file paths.

Paths may use either `/` or `\\` as separators; relative paths in the records
always use `/`.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from patternimport.naming.identifiers import normalize_identifier


@dataclass(frozen=True)
class FileRecord:
    """
    A discovered file, split into the parts used for name generation.

    `path_prefix` is the identifier-safe form of the containing subdirectory,
    set only for recursive searches of files below the base directory.
    """

    filename: str
    relative_path: str
    path_prefix: str
    stem: str
    suffix: str


def _to_posix(path: str | Path) -> str:
    return str(path).replace("\\", "/")


def _escapes_base(relative_path: str) -> bool:
    return relative_path == ".." or relative_path.startswith("../")


def split_filename(filename: str) -> tuple[str, str]:
    """Split a filename into `(stem, suffix)` at the last dot."""
    parts = filename.split(".")
    if len(parts) == 1:
        return parts[0], ""
    return ".".join(parts[:-1]), parts[-1]


def collect_file_records(
    base_dir: str | Path, is_recursive: bool, file_paths: Iterable[str | Path]
) -> list[FileRecord]:
    """
    Build a `FileRecord` for each path, in input order.

    Paths with no final segment, and paths outside `base_dir`, are dropped.
    """
    base = _to_posix(base_dir)
    records: list[FileRecord] = []

    for raw_path in file_paths:
        file_path = _to_posix(raw_path)
        filename = posixpath.basename(file_path)
        if not filename:
            continue

        relative_path = posixpath.relpath(file_path, base)
        # The base directory itself is not a file below it.
        if relative_path == "." or _escapes_base(relative_path):
            continue

        path_prefix = ""
        if is_recursive and relative_path != filename:
            dir_path = posixpath.dirname(relative_path)
            if dir_path != "." and ".." not in dir_path.split("/"):
                path_prefix = normalize_identifier(dir_path)

        stem, suffix = split_filename(filename)
        records.append(
            FileRecord(
                filename=filename,
                relative_path=relative_path,
                path_prefix=path_prefix,
                stem=stem,
                suffix=suffix,
            )
        )

    return records
