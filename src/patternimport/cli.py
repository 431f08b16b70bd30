#!/usr/bin/env python3
"""
patternimport: Generate import/export declarations for files matching a glob

Common usage:
  patternimport src/assets
  patternimport src/assets -p '**/*.{png,svg}'
  patternimport --target src/assets/index.js
  patternimport --target src/assets/index.js --selection 3:12
  patternimport --list-files src/assets

The pattern is relative to the directory. Patterns containing `**` search
subdirectories, and names of files found there are prefixed with their path.
With --target, import paths are relative to the target file, so only files
inside its directory are imported.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from patternimport.config import (
    DEFAULT_PATTERN,
    find_config_file,
    load_config,
    merge_cli_with_config,
)
from patternimport.declarations import declarations_for_paths
from patternimport.document import Selection, write_declarations
from patternimport.file_resolver import FileResolver, FileResolverConfig


@dataclass
class Options:
    """Command-line options for the patternimport tool."""

    directory: str | None
    pattern: str
    target: str | None
    selection: str | None
    list_files: bool
    verbose: bool
    version: bool
    # File discovery options
    exclude: list[str] | None
    extend_exclude: list[str]
    respect_gitignore: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=str,
        default=None,
        help="Directory to search (default: the directory of --target, or '.')",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        type=str,
        default=DEFAULT_PATTERN,
        help="Glob pattern relative to the directory; supports ** and {a,b} (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=str,
        default=None,
        metavar="FILE",
        help="Insert the declarations into this file instead of printing them",
    )
    parser.add_argument(
        "--selection",
        type=str,
        default=None,
        metavar="START:END",
        help="Replace these lines of --target (1-based, inclusive) instead of inserting at the top",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print matched file paths without generating declarations",
    )
    # File discovery options
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Replace all default exclusion patterns. Can be repeated",
    )
    parser.add_argument(
        "--extend-exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Add to default exclusion patterns (e.g., 'dist/'). Can be repeated",
    )
    parser.add_argument(
        "--no-respect-gitignore",
        action="store_true",
        dest="no_respect_gitignore",
        help="Disable .gitignore integration",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print discovery details to stderr",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # Re-parse with sentinel defaults to detect which flags were actually supplied,
    # even when the user passes the default value.
    _SENTINEL = object()
    _tracked_flags: dict[str, str] = {
        # argparse dest name -> Options field name
        "pattern": "pattern",
        "exclude": "exclude",
        "extend_exclude": "extend_exclude",
        "no_respect_gitignore": "respect_gitignore",
    }
    sentinel_parser = argparse.ArgumentParser(add_help=False)
    sentinel_parser.add_argument("-p", "--pattern", default=_SENTINEL)
    sentinel_parser.add_argument("--exclude", action="append", default=None)
    sentinel_parser.add_argument("--extend-exclude", action="append", default=None)
    sentinel_parser.add_argument(
        "--no-respect-gitignore",
        dest="no_respect_gitignore",
        action="store_true",
        default=_SENTINEL,
    )
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    for dest_name, field_name in _tracked_flags.items():
        val = getattr(sentinel_opts, dest_name, _SENTINEL)
        # For append actions, None means not supplied; a list means supplied
        if dest_name in ("exclude", "extend_exclude"):
            if val is not None:
                explicit_flags.add(field_name)
        elif val is not _SENTINEL:
            explicit_flags.add(field_name)

    return (
        Options(
            directory=opts.directory,
            pattern=opts.pattern,
            target=opts.target,
            selection=opts.selection,
            list_files=opts.list_files,
            verbose=opts.verbose,
            version=opts.version,
            exclude=opts.exclude,
            extend_exclude=opts.extend_exclude,
            respect_gitignore=not opts.no_respect_gitignore,
        ),
        explicit_flags,
    )


def _base_directory(options: Options) -> Path:
    """The search directory: explicit, else the target's directory, else cwd."""
    if options.directory:
        return Path(options.directory)
    if options.target:
        return Path(options.target).parent
    return Path(".")


def _log(options: Options, message: str) -> None:
    if options.verbose:
        print(message, file=sys.stderr)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the patternimport CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("patternimport")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.selection and not options.target:
        print("Error: --selection requires --target", file=sys.stderr)
        return 1

    base_dir = _base_directory(options)
    if not base_dir.is_dir():
        print(f"Error: Directory not found: {base_dir}", file=sys.stderr)
        return 1
    base_dir = base_dir.resolve()

    # Load and merge config file settings
    config_path = find_config_file(base_dir)
    if config_path:
        _log(options, f"Using config: {config_path}")
        merge_cli_with_config(options, load_config(config_path), explicit_flags)

    try:
        selection = Selection.parse(options.selection) if options.selection else None

        resolver = FileResolver(
            FileResolverConfig(
                exclude=options.exclude,
                extend_exclude=options.extend_exclude,
                respect_gitignore=options.respect_gitignore,
            )
        )
        files = resolver.find_files(base_dir, options.pattern)
        _log(options, f"Matched {len(files)} file(s) for {options.pattern!r} in {base_dir}")

        if options.list_files:
            for f in files:
                print(f)
            return 0

        if not files:
            print(
                f"Error: No files match {options.pattern!r} in {base_dir}",
                file=sys.stderr,
            )
            return 1

        # Import paths must resolve from the file the block is written into.
        import_base = Path(options.target).resolve().parent if options.target else base_dir
        declarations = declarations_for_paths(import_base, options.pattern, files)
        if not len(declarations):
            print(
                f"Error: No matched files are inside {import_base}, the directory of the target",
                file=sys.stderr,
            )
            return 1
        block = declarations.render()

        if options.target:
            write_declarations(Path(options.target), block, selection)
            _log(options, f"Wrote {len(declarations)} declaration(s) to {options.target}")
        else:
            sys.stdout.write(block)
    except (ValueError, FileNotFoundError) as e:
        # User errors: bad pattern, bad selection, missing target file.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
