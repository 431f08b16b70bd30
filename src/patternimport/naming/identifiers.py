"""Identifier normalization for generated import names."""

from __future__ import annotations

import re

# Characters that can appear in file and directory names but not in identifiers.
_SPECIAL_CHARS_RE = re.compile(r"[ \\/\-.@]")

_IDENTIFIER_START_RE = re.compile(r"[a-zA-Z_$]")


def normalize_identifier(text: str) -> str:
    """
    Replace spaces, slashes, backslashes, hyphens, dots, and `@` with underscores.
    Each character is replaced individually (no collapsing). An empty string
    normalizes to `"_"` so callers always get a non-empty name.
    """
    if text == "":
        return "_"
    return _SPECIAL_CHARS_RE.sub("_", text)


def is_valid_identifier_start(text: str) -> bool:
    """
    Check whether `text` starts with an ASCII letter, underscore, or dollar sign.
    Only the first character is checked.
    """
    return bool(text) and _IDENTIFIER_START_RE.match(text) is not None
