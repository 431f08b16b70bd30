"""
Default exclude patterns for file discovery.

These patterns use gitignore syntax. Directory patterns end with `/`.
"""

from __future__ import annotations

# Directories that should almost never contain files worth importing.
DEFAULT_EXCLUDES: list[str] = [
    # Version control
    ".git/",
    ".hg/",
    ".svn/",
    # JavaScript/Node
    "node_modules/",
    "bower_components/",
    "jspm_packages/",
    ".next/",
    ".nuxt/",
    ".output/",
    ".cache/",
    ".parcel-cache/",
    ".turbo/",
    ".svelte-kit/",
    # Python
    ".venv/",
    "__pycache__/",
    # IDE/Editor
    ".idea/",
    ".vscode/",
    ".vs/",
    # Coverage
    "coverage/",
    ".nyc_output/",
]
