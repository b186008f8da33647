"""Protocol definitions for core abstractions.

Components depend on these interfaces rather than on ``NativeFileSystem``
so test doubles can be injected without inheritance. All concrete
implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from fsfile.types import FsResult


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for native filesystem operations.

    Queries report absence through ``FsResult`` or a falsy value.
    Mutations return True on success or raise an ``FsError``.
    """

    encoding: str

    def stat(self, path: Path) -> FsResult[os.stat_result]:
        """Get metadata for a path, following symlinks.

        Args:
            path: Path to probe.

        Returns:
            Result holding the stat record, or not_found.
        """
        ...

    def lstat(self, path: Path) -> FsResult[os.stat_result]:
        """Get metadata for a path without following symlinks."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists and is readable."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def access(self, path: Path, readable: bool = True, writable: bool = False) -> bool:
        """Check access permissions on a path.

        Args:
            path: Path to check.
            readable: Require read permission.
            writable: Require write permission.

        Returns:
            True if every requested permission is granted.
        """
        ...

    def read(self, path: Path) -> FsResult[str]:
        """Read text content from a file.

        Args:
            path: Path to the file.

        Returns:
            Result holding the content, not_found, or failed.
        """
        ...

    def read_bytes(self, path: Path) -> FsResult[bytes]:
        """Read binary content from a file."""
        ...

    def list_names(self, path: Path) -> list[str]:
        """List entry names in a directory.

        Raises:
            DirectoryReadError: If the directory cannot be read.
        """
        ...

    def list_paths(self, path: Path, recursive: bool = False) -> list[Path]:
        """List entries in a directory as absolute paths.

        Raises:
            DirectoryReadError: If a directory cannot be read.
        """
        ...

    def bytes_human(self, path: Path) -> str:
        """Get the size of a file in human readable format."""
        ...

    def write(self, path: Path, content: str | bytes) -> bool:
        """Write content to a file, creating parent directories.

        Raises:
            WriteFailure: If the file cannot be written.
        """
        ...

    def append(self, path: Path, content: str | bytes) -> bool:
        """Append content to a file."""
        ...

    def prepend(self, path: Path, content: str) -> bool:
        """Prepend content to a text file."""
        ...

    def remove(self, paths: Path | Iterable[Path]) -> bool:
        """Remove files or directory trees, ignoring missing paths.

        Raises:
            RemoveFailure: If an existing path cannot be removed.
        """
        ...

    def rename(self, source: Path, target: Path) -> bool:
        """Move a file or directory."""
        ...

    def copy_file(self, source: Path, target: Path) -> bool:
        """Copy a file, into ``target`` when it is a directory.

        Raises:
            CopySourceMissing: If the source file does not exist.
        """
        ...

    def mkdir(self, path: Path, recursive: bool = True) -> bool:
        """Create a directory."""
        ...

    def chmod(self, path: Path, mode: int = 0o777) -> bool:
        """Set the permission bits of a path."""
        ...

    def symlink(self, target: Path, link_path: Path) -> bool:
        """Create a symbolic link at ``link_path`` pointing to ``target``."""
        ...

    def readlink(self, path: Path) -> Path | None:
        """Get the stored target of a symbolic link, None if it is not a link."""
        ...
