"""Tests for source file discovery."""

from pathlib import Path

import pytest

from mdpress.collector import collect_source_files
from mdpress.errors import ConfigurationError, NoSourceFilesError, NotFoundError


def test_finds_markdown_files(source_dir):
    files = collect_source_files([source_dir])
    assert [f.name for f in files] == ["01-intro.md", "02-usage.md"]
    assert all(f.is_absolute() for f in files)


def test_not_recursive(source_dir):
    nested = source_dir / "nested"
    nested.mkdir()
    (nested / "deep.md").write_text("# Deep")
    assert "deep.md" not in [f.name for f in collect_source_files([source_dir])]


def test_overlapping_directories_deduplicated(source_dir, tmp_path):
    alias = tmp_path / "docs" / ".." / "docs"
    files = collect_source_files([source_dir, alias, str(source_dir)])
    assert len(files) == 2
    assert len(set(files)) == 2


def test_symlinked_file_resolves_to_one_path(source_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "intro-link.md").symlink_to(source_dir / "01-intro.md")
    files = collect_source_files([source_dir, other])
    assert files.count((source_dir / "01-intro.md").resolve()) == 1
    assert len(files) == 2


def test_multiple_directories_sorted(tmp_path):
    b = tmp_path / "b"
    a = tmp_path / "a"
    for d in (b, a):
        d.mkdir()
        (d / "x.md").write_text("x")
    files = collect_source_files([b, a])
    assert files == [(a / "x.md").resolve(), (b / "x.md").resolve()]


def test_glob_pattern_directories(tmp_path):
    for name in ("one", "two"):
        (tmp_path / name).mkdir()
        (tmp_path / name / f"{name}.md").write_text(name)
    files = collect_source_files([str(tmp_path / "*")])
    assert [f.name for f in files] == ["one.md", "two.md"]


def test_empty_directory_list_raises():
    with pytest.raises(ConfigurationError, match="cannot be empty"):
        collect_source_files([])


def test_no_markdown_files_raises(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    with pytest.raises(NoSourceFilesError) as exc_info:
        collect_source_files([empty])
    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.directories == [str(empty)]


def test_missing_directory_counts_as_empty(tmp_path):
    with pytest.raises(NoSourceFilesError):
        collect_source_files([Path(tmp_path / "nope")])
