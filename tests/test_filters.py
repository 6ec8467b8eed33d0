# tests/test_filters.py
from pathlib import Path

import pytest

from dir_listfiles import ListOptions
from dir_listfiles.core.filters import EntryFilter


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    _make_file(tmp_path / "file.txt")
    _make_file(tmp_path / "FILE.TXT.md")
    _make_file(tmp_path / ".hidden")
    (tmp_path / "sub").mkdir()
    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def entry_filter() -> EntryFilter:
    return EntryFilter()


def test_default_keeps_everything(tree, entry_filter):
    opts = ListOptions()
    for name in ["file.txt", ".hidden", "sub", ".git"]:
        assert entry_filter.matches(name, opts, base=str(tree))


def test_only_directories_drops_files(tree, entry_filter):
    opts = ListOptions(only_dirs=True)
    assert entry_filter.matches("sub", opts, base=str(tree))
    assert not entry_filter.matches("file.txt", opts, base=str(tree))


def test_only_files_drops_directories(tree, entry_filter):
    opts = ListOptions(only_files=True)
    assert entry_filter.matches("file.txt", opts, base=str(tree))
    assert not entry_filter.matches("sub", opts, base=str(tree))


def test_exclude_directories(tree, entry_filter):
    opts = ListOptions(no_dirs=True)
    assert not entry_filter.matches("sub", opts, base=str(tree))
    assert entry_filter.matches("file.txt", opts, base=str(tree))


def test_full_path_candidate_resolves_directory_itself(tree, entry_filter):
    opts = ListOptions(only_files=True)
    assert not entry_filter.matches(str(tree / "sub"), opts)
    assert entry_filter.matches(str(tree / "file.txt"), opts)


def test_known_is_dir_skips_stat(entry_filter):
    # The path does not exist, so only the supplied flag can make it a directory.
    opts = ListOptions(only_dirs=True)
    assert entry_filter.matches("/nonexistent/dir", opts, is_dir=True)
    assert not entry_filter.matches("/nonexistent/file", opts, is_dir=False)


def test_exclude_hidden_applies_to_files_and_directories(tree, entry_filter):
    opts = ListOptions(no_hidden=True)
    assert not entry_filter.matches(".hidden", opts, base=str(tree))
    assert not entry_filter.matches(".git", opts, base=str(tree))
    assert entry_filter.matches("file.txt", opts, base=str(tree))


def test_exclude_hidden_uses_bare_name_of_full_path(tree, entry_filter):
    opts = ListOptions(no_hidden=True)
    assert not entry_filter.matches(str(tree / ".hidden"), opts)
    assert entry_filter.matches(str(tree / "file.txt"), opts)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("file.txt", True),
        ("FILE.TXT", True),
        ("file.txt.bak", False),
        ("filetxt", False),
        ("txt", False),
    ],
)
def test_extension_matching(entry_filter, name, expected):
    opts = ListOptions(ext="txt")
    assert entry_filter.matches(name, opts, is_dir=False) is expected


def test_extension_is_literal_suffix(entry_filter):
    # A dot in the extension is not a wildcard.
    opts = ListOptions(ext="t.t")
    assert entry_filter.matches("a.t.t", opts, is_dir=False)
    assert not entry_filter.matches("a.tat", opts, is_dir=False)


def test_extension_cannot_revive_excluded_directory(entry_filter):
    opts = ListOptions(no_dirs=True, ext="d")
    assert not entry_filter.matches("conf.d", opts, is_dir=True)
    assert entry_filter.matches("conf.d", ListOptions(ext="d"), is_dir=True)


def test_hidden_file_with_matching_extension_still_dropped(entry_filter):
    opts = ListOptions(no_hidden=True, ext="txt")
    assert not entry_filter.matches(".notes.txt", opts, is_dir=False)
