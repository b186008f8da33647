"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fsfile.context import FsContext, create_context
from fsfile.files import FsFile
from fsfile.native import NativeFileSystem
from fsfile.paths import PathResolver

# 29 bytes
TEST_MD_CONTENT = "# Test\n\nTest content for fs.\n"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a temporary project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def resolver(project_root: Path) -> PathResolver:
    """Create a resolver rooted at the temporary project."""
    return PathResolver(root=project_root, package_root=project_root / "pkg")


@pytest.fixture
def native() -> NativeFileSystem:
    """Create the production filesystem implementation."""
    return NativeFileSystem()


@pytest.fixture
def context(project_root: Path) -> FsContext:
    """Create a context rooted at the temporary project."""
    return create_context(root=project_root)


@pytest.fixture
def files(context: FsContext) -> FsFile:
    """Create file helpers rooted at the temporary project."""
    return FsFile(context)


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def test_md(project_root: Path) -> Path:
    """Create tests/test.md under the project root."""
    path = project_root / "tests" / "test.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(TEST_MD_CONTENT)
    return path


@pytest.fixture
def sample_tree(project_root: Path) -> Path:
    """Create a directory tree three levels deep.

    Layout::

        src/
            .hidden
            readme.md
            a/
                one.txt
                b/
                    two.txt
                    c/
                        three.txt
            empty/
    """
    src = project_root / "src"
    (src / "a" / "b" / "c").mkdir(parents=True)
    (src / "empty").mkdir()
    (src / ".hidden").write_text("secret")
    (src / "readme.md").write_text("# Readme\n")
    (src / "a" / "one.txt").write_text("one")
    (src / "a" / "b" / "two.txt").write_text("two")
    (src / "a" / "b" / "c" / "three.txt").write_text("three")
    return src


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.encoding = "utf-8"
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.list_names.return_value = []
    return fs
