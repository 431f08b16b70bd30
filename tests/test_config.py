"""Tests for config file loading and merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from patternimport.cli import Options
from patternimport.config import (
    DEFAULT_PATTERN,
    PatternImportConfig,
    find_config_file,
    load_config,
    merge_cli_with_config,
)


def test_find_config_patternimport_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text('pattern = "*.svg"\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_dot_file_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "patternimport.toml").write_text('pattern = "*.svg"\n')
    dot_config = tmp_path / ".patternimport.toml"
    dot_config.write_text('pattern = "*.png"\n')
    assert find_config_file(tmp_path) == dot_config


def test_find_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[tool.patternimport]\npattern = "*.svg"\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_pyproject_without_section_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
    assert find_config_file(tmp_path) is None


def test_find_config_walks_up(tmp_path: Path) -> None:
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text('pattern = "*.svg"\n')
    subdir = tmp_path / "src" / "assets"
    subdir.mkdir(parents=True)
    assert find_config_file(subdir) == config_file


def test_find_config_none_when_missing(tmp_path: Path) -> None:
    assert find_config_file(tmp_path) is None


def test_load_config(tmp_path: Path) -> None:
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text('pattern = "**/*.svg"\n')
    config = load_config(config_file)
    assert config.pattern == "**/*.svg"
    # Unset fields should be None (not set)
    assert config.exclude is None
    assert config.respect_gitignore is None


def test_load_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        '[project]\nname = "web"\n\n[tool.patternimport]\npattern = "*.{png,webp}"\n'
    )
    config = load_config(config_file)
    assert config.pattern == "*.{png,webp}"


def test_load_config_kebab_case_sections(tmp_path: Path) -> None:
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text(
        'pattern = "*.png"\n'
        "\n"
        "[discovery]\n"
        'extend-exclude = ["dist/"]\n'
        'exclude = ["vendor/"]\n'
        "respect-gitignore = false\n"
    )
    config = load_config(config_file)
    assert config.pattern == "*.png"
    assert config.extend_exclude == ["dist/"]
    assert config.exclude == ["vendor/"]
    assert config.respect_gitignore is False


def test_load_config_malformed_toml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Malformed TOML should return an empty config with a warning, not crash."""
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text("this is not valid toml [[[")
    config = load_config(config_file)
    assert config == PatternImportConfig()
    assert "malformed config file" in capsys.readouterr().err


def test_load_config_non_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """A config file that is not valid UTF-8 is ignored with a warning."""
    config_file = tmp_path / "patternimport.toml"
    config_file.write_bytes(b'pattern = "\xff"\n')
    config = load_config(config_file)
    assert config == PatternImportConfig()
    assert "malformed config file" in capsys.readouterr().err


def test_load_config_unreadable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # A directory in place of the file fails to read on every platform.
    config_dir = tmp_path / "patternimport.toml"
    config_dir.mkdir()
    config = load_config(config_dir)
    assert config == PatternImportConfig()
    assert "unreadable or malformed config file" in capsys.readouterr().err


def test_load_config_skips_wrong_types(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text(
        "pattern = 5\n"
        "\n"
        "[discovery]\n"
        'exclude = "dist/"\n'
        "extend-exclude = [1, 2]\n"
        'respect-gitignore = "no"\n'
    )
    config = load_config(config_file)
    assert config == PatternImportConfig()
    err = capsys.readouterr().err
    assert "ignoring config key 'pattern'" in err
    assert "expected a list of strings" in err
    assert "expected a boolean" in err


def test_load_config_warns_unknown_keys(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "patternimport.toml"
    config_file.write_text('unknown_key = true\npattern = "*.svg"\n')
    config = load_config(config_file)
    assert config.pattern == "*.svg"
    assert "unrecognized config key 'unknown_key'" in capsys.readouterr().err


def _make_options(
    directory: str | None = None,
    pattern: str = DEFAULT_PATTERN,
    target: str | None = None,
    selection: str | None = None,
    list_files: bool = False,
    verbose: bool = False,
    version: bool = False,
    exclude: list[str] | None = None,
    extend_exclude: list[str] | None = None,
    respect_gitignore: bool = True,
) -> Options:
    """Create an Options with defaults for all required fields."""
    return Options(
        directory=directory,
        pattern=pattern,
        target=target,
        selection=selection,
        list_files=list_files,
        verbose=verbose,
        version=version,
        exclude=exclude,
        extend_exclude=extend_exclude if extend_exclude is not None else [],
        respect_gitignore=respect_gitignore,
    )


def test_merge_no_config() -> None:
    opts = _make_options()
    result = merge_cli_with_config(opts, config=None, explicit_flags=set())
    assert result.pattern == DEFAULT_PATTERN


def test_merge_config_overrides_defaults() -> None:
    opts = _make_options()
    config = PatternImportConfig(pattern="**/*.svg", respect_gitignore=False)
    result = merge_cli_with_config(opts, config=config, explicit_flags=set())
    assert result.pattern == "**/*.svg"
    assert result.respect_gitignore is False


def test_merge_explicit_cli_overrides_config() -> None:
    opts = _make_options(pattern="*.png")
    config = PatternImportConfig(pattern="**/*.svg")
    result = merge_cli_with_config(opts, config=config, explicit_flags={"pattern"})
    assert result.pattern == "*.png"


def test_merge_file_discovery_from_config() -> None:
    config = PatternImportConfig(extend_exclude=["dist/"], exclude=["vendor/"])
    result = merge_cli_with_config(_make_options(), config=config, explicit_flags=set())
    assert result.extend_exclude == ["dist/"]
    assert result.exclude == ["vendor/"]
