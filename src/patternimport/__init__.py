from patternimport.declarations import (
    DeclarationMismatchError,
    ExportDeclarations,
    build_declarations,
    declarations_for_paths,
)
from patternimport.naming import (
    FileRecord,
    build_stem_count_map,
    collect_file_records,
    generate_export_name,
    is_valid_identifier_start,
    normalize_identifier,
)

__all__ = [
    "DeclarationMismatchError",
    "ExportDeclarations",
    "FileRecord",
    "build_declarations",
    "build_stem_count_map",
    "collect_file_records",
    "declarations_for_paths",
    "generate_export_name",
    "is_valid_identifier_start",
    "normalize_identifier",
]
