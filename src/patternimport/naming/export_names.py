"""
Export name generation for collected file records.

Names are generated in two passes over a batch: `build_stem_count_map()` counts
grouping keys across the whole batch, then `generate_export_name()` names each
record against those counts. Counting must finish before any name is generated,
so that the first of two duplicates is disambiguated too.

Rules, in order:
1. Special characters in the stem become underscores.
2. A stem that does not start with a letter, `_` or `$` gets a `_` prefix and a
   `__<suffix>` ending.
3. Otherwise, a stem shared with another record gets a `__<suffix>` ending.
4. Under recursive search, the path prefix is prepended with a `_`.

Two extensionless files with the same stem get the same name; there is no suffix
to tell them apart.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from patternimport.naming.file_records import FileRecord
from patternimport.naming.identifiers import is_valid_identifier_start, normalize_identifier

StemCountMap = Counter[str]


def grouping_key(record: FileRecord, is_recursive: bool) -> str:
    """Key used to detect duplicate stems: the stem, joined to the path prefix if any."""
    if is_recursive and record.path_prefix:
        return f"{record.path_prefix}_{record.stem}"
    return record.stem


def build_stem_count_map(records: Iterable[FileRecord], is_recursive: bool) -> StemCountMap:
    """Count how many records share each grouping key."""
    return Counter(grouping_key(record, is_recursive) for record in records)


def generate_export_name(
    record: FileRecord, is_recursive: bool, stem_count: Mapping[str, int]
) -> str:
    """Generate the identifier for one record, given the counts for its whole batch."""
    name = normalize_identifier(record.stem)
    is_duplicated = stem_count.get(grouping_key(record, is_recursive), 0) > 1

    if not is_valid_identifier_start(name):
        name = f"_{name}__{record.suffix}" if record.suffix else f"_{name}"
    elif is_duplicated and record.suffix:
        name = f"{name}__{record.suffix}"

    if is_recursive and record.path_prefix:
        name = f"{record.path_prefix}_{name}"

    return name


def generate_export_names(records: list[FileRecord], is_recursive: bool) -> list[str]:
    """Name every record in a batch, in input order."""
    stem_count = build_stem_count_map(records, is_recursive)
    return [generate_export_name(record, is_recursive, stem_count) for record in records]
