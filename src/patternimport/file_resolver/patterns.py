"""
Glob pattern helpers: brace expansion and recursion detection.

`pathlib` globbing has no `{a,b}` alternation, so patterns like
`*.{png,jpg,jpeg,svg}` are expanded into one pattern per alternative first.
"""

from __future__ import annotations

RECURSIVE_MARKER = "**"


def is_recursive_pattern(pattern: str) -> bool:
    """A pattern is recursive if it can descend into subdirectories via `**`."""
    return RECURSIVE_MARKER in pattern


def _find_brace_group(pattern: str) -> tuple[int, int, list[int]] | None:
    """
    Locate the first balanced `{...}` group that contains a top-level comma.
    Returns `(open_index, close_index, comma_indexes)`, or `None`.
    """
    start = 0
    while True:
        open_index = pattern.find("{", start)
        if open_index < 0:
            return None
        depth = 0
        commas: list[int] = []
        for i in range(open_index, len(pattern)):
            c = pattern[i]
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    if commas:
                        return open_index, i, commas
                    break
            elif c == "," and depth == 1:
                commas.append(i)
        # No usable group here (no comma, or unbalanced); look further right.
        start = open_index + 1


def expand_braces(pattern: str) -> list[str]:
    """
    Expand `{a,b}` alternations, including nested ones, preserving order and
    dropping duplicates. Groups without a comma and unmatched braces are kept
    literally.
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]

    open_index, close_index, commas = group
    prefix = pattern[:open_index]
    suffix = pattern[close_index + 1 :]
    bounds = [open_index, *commas, close_index]
    alternatives = [pattern[bounds[i] + 1 : bounds[i + 1]] for i in range(len(bounds) - 1)]

    result: list[str] = []
    for alternative in alternatives:
        for expanded in expand_braces(prefix + alternative + suffix):
            if expanded not in result:
                result.append(expanded)
    return result
