"""Fail-soft adapter over the host filesystem.

This module wraps ``pathlib``, ``os`` and ``shutil`` so that no ``OSError``
reaches callers. Queries report absence through ``FsResult`` or a falsy
return value; mutations that cannot produce a partial result raise an
``FsError`` tagged with the operation and path.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from fsfile.errors import (
    CopySourceMissing,
    DirectoryReadError,
    RemoveFailure,
    WriteFailure,
)
from fsfile.types import FsResult

logger = logging.getLogger(__name__)

SIZE_UNITS = ["B", "kB", "MB", "GB", "TB"]


def format_size(num_bytes: int) -> str:
    """Format a byte count with base-1024 units.

    Args:
        num_bytes: Size in bytes.

    Returns:
        Size such as ``"29 B"`` or ``"1.5 kB"``.
    """
    tier = 0
    scaled = float(num_bytes)
    while scaled >= 1024 and tier < len(SIZE_UNITS) - 1:
        scaled /= 1024
        tier += 1
    number = f"{num_bytes / 1024**tier:.2f}".rstrip("0").rstrip(".")
    return f"{number} {SIZE_UNITS[tier]}"


class NativeFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def stat(self, path: Path) -> FsResult[os.stat_result]:
        """Get metadata for a path, following symlinks."""
        try:
            return FsResult.found(path, path.stat())
        except FileNotFoundError:
            return FsResult.missing(path)
        except OSError as e:
            return FsResult.failure(path, str(e))

    def lstat(self, path: Path) -> FsResult[os.stat_result]:
        """Get metadata for a path without following symlinks."""
        try:
            return FsResult.found(path, path.lstat())
        except FileNotFoundError:
            return FsResult.missing(path)
        except OSError as e:
            return FsResult.failure(path, str(e))

    def exists(self, path: Path) -> bool:
        """Check if a path exists and is readable."""
        if not self.stat(path).ok:
            return False
        return os.access(path, os.R_OK)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def access(self, path: Path, readable: bool = True, writable: bool = False) -> bool:
        """Check access permissions on a path.

        Args:
            path: Path to check.
            readable: Require read permission.
            writable: Require write permission.

        Returns:
            True if every requested permission is granted.
        """
        mode = os.F_OK
        if readable:
            mode |= os.R_OK
        if writable:
            mode |= os.W_OK
        granted = os.access(path, mode)
        if not granted:
            logger.debug("Access check failed for %s (mode=%s)", path, mode)
        return granted

    def read(self, path: Path) -> FsResult[str]:
        """Read text content from a file."""
        try:
            return FsResult.found(path, path.read_text(encoding=self.encoding))
        except FileNotFoundError:
            return FsResult.missing(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Read failed for %s: %s", path, e)
            return FsResult.failure(path, str(e))

    def read_bytes(self, path: Path) -> FsResult[bytes]:
        """Read binary content from a file."""
        try:
            return FsResult.found(path, path.read_bytes())
        except FileNotFoundError:
            return FsResult.missing(path)
        except OSError as e:
            logger.debug("Read failed for %s: %s", path, e)
            return FsResult.failure(path, str(e))

    def list_names(self, path: Path) -> list[str]:
        """List entry names in a directory.

        Raises:
            DirectoryReadError: If the directory cannot be read.
        """
        try:
            return os.listdir(path)
        except OSError as e:
            logger.warning("Could not read directory %s: %s", path, e)
            raise DirectoryReadError(path) from e

    def list_paths(self, path: Path, recursive: bool = False) -> list[Path]:
        """List entries in a directory as absolute paths.

        In recursive mode subdirectories are replaced by their contents,
        depth-first, so only non-directory entries are returned.

        Raises:
            DirectoryReadError: If a directory cannot be read.
        """
        paths = [path / name for name in self.list_names(path)]
        if not recursive:
            return paths

        flattened: list[Path] = []
        for child in paths:
            if child.is_dir():
                flattened.extend(self.list_paths(child, recursive=True))
            else:
                flattened.append(child)
        return flattened

    def bytes_human(self, path: Path) -> str:
        """Get the size of a file in human readable format."""
        result = self.stat(path)
        if not result.ok:
            return "0 B"
        return format_size(result.value.st_size)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def write(self, path: Path, content: str | bytes) -> bool:
        """Write content to a file, creating parent directories.

        Raises:
            WriteFailure: If the file cannot be written.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding=self.encoding)
        except OSError as e:
            logger.warning("Write failed for %s: %s", path, e)
            raise WriteFailure(path) from e
        return True

    def append(self, path: Path, content: str | bytes) -> bool:
        """Append content to a file.

        Raises:
            WriteFailure: If the file cannot be written.
        """
        try:
            if isinstance(content, bytes):
                with path.open("ab") as handle:
                    handle.write(content)
            else:
                with path.open("a", encoding=self.encoding) as handle:
                    handle.write(content)
        except OSError as e:
            logger.warning("Append failed for %s: %s", path, e)
            raise WriteFailure(path, operation="append") from e
        return True

    def prepend(self, path: Path, content: str) -> bool:
        """Prepend content to a text file.

        Raises:
            WriteFailure: If the file cannot be read or written.
        """
        current = self.read(path)
        if not current.ok:
            logger.warning("Prepend failed for %s: %s", path, current.error or "not found")
            raise WriteFailure(path, operation="prepend")
        try:
            path.write_text(f"{content}{current.value}", encoding=self.encoding)
        except OSError as e:
            logger.warning("Prepend failed for %s: %s", path, e)
            raise WriteFailure(path, operation="prepend") from e
        return True

    def remove(self, paths: Path | Iterable[Path]) -> bool:
        """Remove files or directory trees.

        Missing paths are ignored.

        Raises:
            RemoveFailure: If an existing path cannot be removed.
        """
        targets = [paths] if isinstance(paths, Path) else list(paths)
        for target in targets:
            try:
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink(missing_ok=True)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Remove failed for %s: %s", target, e)
                raise RemoveFailure(target) from e
        return True

    def rename(self, source: Path, target: Path) -> bool:
        """Move a file or directory."""
        try:
            source.rename(target)
        except OSError as e:
            logger.error("Rename %s -> %s failed: %s", source, target, e)
            return False
        return True

    def copy_file(self, source: Path, target: Path) -> bool:
        """Copy a file.

        If ``target`` is an existing directory the copy is placed inside it
        under the source's base name.

        Raises:
            CopySourceMissing: If the source file does not exist.
            WriteFailure: If the target cannot be written.
        """
        if not source.is_file():
            logger.warning("Copy source not found: %s", source)
            raise CopySourceMissing(source)

        if target.is_dir():
            target = target / source.name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as e:
            logger.warning("Copy %s -> %s failed: %s", source, target, e)
            raise WriteFailure(target, operation="copy") from e
        return True

    def mkdir(self, path: Path, recursive: bool = True) -> bool:
        """Create a directory.

        Args:
            path: Directory to create.
            recursive: Create missing parents; an existing directory is
                then not an error.
        """
        try:
            path.mkdir(parents=recursive, exist_ok=recursive)
        except OSError as e:
            logger.error("mkdir failed for %s: %s", path, e)
            return False
        return True

    def chmod(self, path: Path, mode: int = 0o777) -> bool:
        """Set the permission bits of a path."""
        try:
            path.chmod(mode)
        except OSError as e:
            logger.error("chmod failed for %s: %s", path, e)
            return False
        return True

    def symlink(self, target: Path, link_path: Path) -> bool:
        """Create a symbolic link at ``link_path`` pointing to ``target``."""
        try:
            link_path.symlink_to(target, target_is_directory=target.is_dir())
        except OSError as e:
            logger.error("symlink %s -> %s failed: %s", link_path, target, e)
            return False
        return True

    def readlink(self, path: Path) -> Path | None:
        """Get the stored target of a symbolic link, None if it is not a link."""
        try:
            return Path(os.readlink(path))
        except OSError as e:
            logger.debug("readlink failed for %s: %s", path, e)
            return None
