"""
Assembly of import/export declarations from collected file records.

Output is sorted by the full text of each import statement (not by name or by
discovery order), and the export list follows the same order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from patternimport.file_resolver.patterns import is_recursive_pattern
from patternimport.naming import FileRecord, collect_file_records, generate_export_names


class DeclarationMismatchError(ValueError):
    """Import statements and export names did not pair up one-to-one."""


def import_path(relative_path: str) -> str:
    """Module specifier for a relative path, always starting with `./` or `../`."""
    if relative_path.startswith(("./", "../")):
        return relative_path
    return f"./{relative_path}"


def import_statement(name: str, relative_path: str) -> str:
    return f'import {name} from "{import_path(relative_path)}";'


def export_statement(names: Iterable[str]) -> str:
    return f"export {{ {', '.join(names)} }};"


@dataclass
class ExportDeclarations:
    """Sorted import statements and the matching exported names."""

    imports: list[str] = field(default_factory=list)
    exports: list[str] = field(default_factory=list)

    @property
    def import_block(self) -> str:
        return "\n".join(self.imports)

    @property
    def export_line(self) -> str:
        return export_statement(self.exports)

    def render(self) -> str:
        """Import block, a blank line, then the export statement."""
        return f"{self.import_block}\n\n{self.export_line}\n"

    def __len__(self) -> int:
        return len(self.imports)


def build_declarations(records: list[FileRecord], is_recursive: bool) -> ExportDeclarations:
    """
    Name every record and pair it with its import statement, sorted by the
    import statement text.
    """
    imports: list[str] = []
    exports: list[str] = []
    for record, name in zip(records, generate_export_names(records, is_recursive)):
        imports.append(import_statement(name, record.relative_path))
        exports.append(name)

    if len(imports) != len(exports) or len(imports) != len(records):
        raise DeclarationMismatchError(
            f"The number of import statements ({len(imports)}) and export names"
            f" ({len(exports)}) does not match"
        )

    pairs = sorted(zip(imports, exports), key=lambda pair: pair[0])
    return ExportDeclarations(
        imports=[statement for statement, _ in pairs],
        exports=[name for _, name in pairs],
    )


def declarations_for_paths(
    base_dir: str | Path, pattern: str, file_paths: Iterable[str | Path]
) -> ExportDeclarations:
    """
    Full pipeline for paths already matched by `pattern` under `base_dir`:
    collect records, generate names, and assemble sorted declarations.
    """
    is_recursive = is_recursive_pattern(pattern)
    records = collect_file_records(base_dir, is_recursive, file_paths)
    return build_declarations(records, is_recursive)
