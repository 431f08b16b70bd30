"""
File record collection and identifier generation.

Pure functions only: no file system access. Callers pass already-resolved paths.
"""

from patternimport.naming.export_names import (
    StemCountMap,
    build_stem_count_map,
    generate_export_name,
    generate_export_names,
    grouping_key,
)
from patternimport.naming.file_records import FileRecord, collect_file_records, split_filename
from patternimport.naming.identifiers import is_valid_identifier_start, normalize_identifier

__all__ = [
    "FileRecord",
    "StemCountMap",
    "build_stem_count_map",
    "collect_file_records",
    "generate_export_name",
    "generate_export_names",
    "grouping_key",
    "is_valid_identifier_start",
    "normalize_identifier",
    "split_filename",
]
