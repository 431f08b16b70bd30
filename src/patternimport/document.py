"""
Insertion of rendered declarations into a document.

A block either replaces a selected line range or goes at the top of the
document. The document's existing content is not inspected.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from strif import atomic_output_file


@dataclass(frozen=True)
class Selection:
    """An inclusive, 1-based range of lines to replace."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line < 1:
            raise ValueError(f"Selection must start at line 1 or later: {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"Selection end ({self.end_line}) is before its start ({self.start_line})"
            )

    @classmethod
    def parse(cls, text: str) -> Selection:
        """Parse `"START:END"` or a single `"LINE"`."""
        start, sep, end = text.partition(":")
        try:
            start_line = int(start)
            end_line = int(end) if sep else start_line
        except ValueError:
            raise ValueError(f"Invalid selection (expected START:END): {text!r}") from None
        return cls(start_line, end_line)


def insert_declarations(document: str, block: str, selection: Selection | None = None) -> str:
    """
    Return `document` with `block` inserted: replacing the selected lines if a
    selection is given, otherwise at the top.
    """
    if selection is None:
        return block + document

    lines = document.splitlines(keepends=True)
    if selection.end_line > len(lines):
        raise ValueError(
            f"Selection {selection.start_line}:{selection.end_line} is past the end of"
            f" the document ({len(lines)} lines)"
        )
    before = "".join(lines[: selection.start_line - 1])
    after = "".join(lines[selection.end_line :])
    return before + block + after


def write_declarations(path: Path, block: str, selection: Selection | None = None) -> None:
    """Insert `block` into the file at `path`, writing atomically."""
    document = path.read_text(encoding="utf-8")
    updated = insert_declarations(document, block, selection)
    with atomic_output_file(path) as tmp_path:
        Path(tmp_path).write_text(updated, encoding="utf-8")
