"""
Self-contained file discovery module: glob patterns with brace expansion,
gitignore awareness, and configurable exclusion patterns.

No imports from `patternimport` outside this package.

Usage::

    from patternimport.file_resolver import FileResolver, FileResolverConfig

    resolver = FileResolver(FileResolverConfig(extend_exclude=["dist/"]))
    files = resolver.find_files("src/assets", "**/*.{png,svg}")
"""

from patternimport.file_resolver.defaults import DEFAULT_EXCLUDES
from patternimport.file_resolver.patterns import expand_braces, is_recursive_pattern
from patternimport.file_resolver.resolver import FileResolver
from patternimport.file_resolver.types import FileResolverConfig

__all__ = [
    "DEFAULT_EXCLUDES",
    "FileResolver",
    "FileResolverConfig",
    "expand_braces",
    "is_recursive_pattern",
]
