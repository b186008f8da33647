"""Tests for directory enumeration."""

from __future__ import annotations

from pathlib import Path

import pytest

from fsfile.errors import DirectoryReadError
from fsfile.native import NativeFileSystem
from fsfile.paths import PathResolver
from fsfile.walker import TreeWalker


@pytest.fixture
def walker(native: NativeFileSystem, resolver: PathResolver) -> TreeWalker:
    """Create a walker over the real filesystem."""
    return TreeWalker(native, resolver)


def _relative(entries, base: Path) -> list[str]:
    return [entry.absolute_path.relative_to(base).as_posix() for entry in entries]


class TestListImmediate:
    """Tests for one-level listing."""

    def test_skips_hidden(self, walker: TreeWalker, sample_tree: Path) -> None:
        """Test dot entries are skipped by default."""
        entries = walker.list_immediate(sample_tree)

        assert _relative(entries, sample_tree) == ["a", "empty", "readme.md"]

    def test_include_hidden(self, walker: TreeWalker, sample_tree: Path) -> None:
        """Test dot entries are listed on request."""
        entries = walker.list_immediate(sample_tree, include_hidden=True)

        assert ".hidden" in _relative(entries, sample_tree)

    def test_relative_directory(self, walker: TreeWalker, sample_tree: Path) -> None:
        """Test a root-relative directory argument."""
        entries = walker.list_immediate("src")

        assert [entry.name for entry in entries] == ["a", "empty", "readme.md"]

    def test_unreadable_directory(self, walker: TreeWalker, project_root: Path) -> None:
        """Test listing a missing directory raises DirectoryReadError."""
        with pytest.raises(DirectoryReadError):
            walker.list_immediate(project_root / "missing")


class TestListRecursive:
    """Tests for depth-first listing."""

    def test_depth_first_order(self, walker: TreeWalker, sample_tree: Path) -> None:
        """Test each directory precedes its children."""
        entries = walker.list_recursive(sample_tree)

        assert _relative(entries, sample_tree) == [
            "a",
            "a/b",
            "a/b/c",
            "a/b/c/three.txt",
            "a/b/two.txt",
            "a/one.txt",
            "empty",
            "readme.md",
        ]

    def test_matches_repeated_immediate_listing(
        self, walker: TreeWalker, sample_tree: Path
    ) -> None:
        """Test recursive listing equals repeated one-level listing."""
        expected: list[Path] = []
        pending = [sample_tree]
        while pending:
            directory = pending.pop()
            for entry in walker.list_immediate(directory):
                expected.append(entry.absolute_path)
                if entry.is_directory:
                    pending.append(entry.absolute_path)

        found = [entry.absolute_path for entry in walker.list_recursive(sample_tree)]

        assert len(found) == len(set(found))
        assert sorted(found) == sorted(expected)

    def test_hidden_directory_subtree(self, walker: TreeWalker, sample_tree: Path) -> None:
        """Test hidden directories are skipped with their contents."""
        (sample_tree / ".git").mkdir()
        (sample_tree / ".git" / "config").write_text("x")

        hidden_off = _relative(walker.list_recursive(sample_tree), sample_tree)
        hidden_on = _relative(walker.list_recursive(sample_tree, include_hidden=True), sample_tree)

        assert ".git/config" not in hidden_off
        assert ".git/config" in hidden_on
        assert ".hidden" in hidden_on

    def test_follows_directory_links(self, walker: TreeWalker, sample_tree: Path) -> None:
        """Test a linked directory's contents appear under the link."""
        (sample_tree / "link").symlink_to(sample_tree / "a" / "b", target_is_directory=True)

        entries = walker.list_recursive(sample_tree)
        names = _relative(entries, sample_tree)

        assert "link/two.txt" in names
        assert "link/c/three.txt" in names
        assert "a/b/two.txt" in names
        link = next(entry for entry in entries if entry.name == "link")
        assert link.is_directory and link.is_symbolic_link

        below_link = _relative(walker.list_immediate(sample_tree / "link"), sample_tree)
        assert set(below_link) <= set(names)

    def test_directory_link_cycle_terminates(
        self, walker: TreeWalker, sample_tree: Path
    ) -> None:
        """Test a link back to an ancestor is listed once and not descended."""
        (sample_tree / "a" / "b" / "up").symlink_to(sample_tree / "a", target_is_directory=True)
        (sample_tree / "loop").symlink_to(sample_tree, target_is_directory=True)

        names = _relative(walker.list_recursive(sample_tree), sample_tree)

        assert "loop" in names
        assert "a/b/up" in names
        assert not any(name.startswith(("loop/", "a/b/up/")) for name in names)
        assert "a/b/c/three.txt" in names

    def test_unreadable_subdirectory_aborts(
        self,
        walker: TreeWalker,
        native: NativeFileSystem,
        sample_tree: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test a failing subdirectory aborts the whole listing."""
        real_list_names = native.list_names
        broken = sample_tree / "a" / "b"

        def list_names(path: Path) -> list[str]:
            if path == broken:
                raise DirectoryReadError(path)
            return real_list_names(path)

        monkeypatch.setattr(native, "list_names", list_names)

        with pytest.raises(DirectoryReadError) as exc_info:
            walker.list_recursive(sample_tree)
        assert exc_info.value.path == broken
