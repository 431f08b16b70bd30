"""Configuration types for file resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from patternimport.file_resolver.defaults import DEFAULT_EXCLUDES


@dataclass
class FileResolverConfig:
    """
    Configuration for file discovery and filtering.

    `tool_name` determines the ignore file name (e.g., `.patternimportignore`).
    `exclude=None` means use `DEFAULT_EXCLUDES`; providing a list replaces them entirely.
    """

    tool_name: str = "patternimport"
    exclude: list[str] | None = None
    extend_exclude: list[str] = field(default_factory=list)
    respect_gitignore: bool = True

    @property
    def effective_exclude(self) -> list[str]:
        """Combined exclude patterns: defaults (or `exclude`) + `extend_exclude`."""
        base = self.exclude if self.exclude is not None else list(DEFAULT_EXCLUDES)
        return base + self.extend_exclude
