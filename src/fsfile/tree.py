"""Composite directory operations: recursive copy, delete and clean."""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from fsfile.errors import CopySourceMissing, DirectoryReadError, FsError, WriteFailure
from fsfile.paths import PathResolver
from fsfile.protocols import FileSystem
from fsfile.walker import TreeWalker

logger = logging.getLogger(__name__)


class TreeOps:
    """Directory-level operations built on a walker and a filesystem.

    Follows Separate Use from Creation: constructor requires all dependencies.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        resolver: PathResolver,
        walker: TreeWalker,
        max_workers: int = 8,
    ) -> None:
        """Initialize tree operations.

        Args:
            filesystem: Filesystem used for leaf operations.
            resolver: Resolver for root-relative paths.
            walker: Walker used for enumeration.
            max_workers: Number of threads copying files concurrently.
        """
        self.fs = filesystem
        self.resolver = resolver
        self.walker = walker
        self.max_workers = max_workers

    def directories_of(self, directory: Path | str) -> list[Path]:
        """Get the directories directly inside a directory.

        Raises:
            DirectoryReadError: If the directory cannot be read.
        """
        return [
            entry.absolute_path
            for entry in self.walker.list_immediate(directory)
            if entry.is_directory
        ]

    def ensure_directory_exists(self, path: Path | str) -> bool:
        """Check that a directory is present and readable."""
        return self.fs.access(self.resolver.absolute(path), readable=True)

    def make_directory(self, path: Path | str, recursive: bool = False) -> bool:
        """Create a directory unless it is already accessible.

        Args:
            path: Directory to create.
            recursive: Create missing ancestors.

        Returns:
            True if the directory exists afterwards.
        """
        path = self.resolver.absolute(path)
        if self.ensure_directory_exists(path):
            return True
        return self.fs.mkdir(path, recursive=recursive)

    def is_empty_directory(self, directory: Path | str, ignore_dot_files: bool = False) -> bool:
        """Check if a directory holds no entries.

        Args:
            directory: Directory to inspect.
            ignore_dot_files: Treat a directory holding only dot files as empty.

        Returns:
            False for unreadable or missing directories.
        """
        try:
            names = self.fs.list_names(self.resolver.absolute(directory))
        except DirectoryReadError:
            return False
        if ignore_dot_files:
            names = [name for name in names if not name.startswith(".")]
        return not names

    def move_directory(self, source: Path | str, target: Path | str) -> bool:
        """Move a directory."""
        return self.fs.rename(self.resolver.absolute(source), self.resolver.absolute(target))

    def copy_directory(self, source: Path | str, destination: Path | str) -> bool:
        """Copy a directory into ``destination/<basename(source)>``.

        Files within one directory level are copied concurrently; the call
        returns only after every child copy has finished. When children
        fail, all siblings still run to completion and the first error is
        raised.

        Args:
            source: Directory to copy.
            destination: Directory receiving the copy.

        Returns:
            True on success.

        Raises:
            CopySourceMissing: If the source is not a directory.
            WriteFailure: If the copy would land inside the source itself.
            FsError: First failure among the child copies.
        """
        source = self.resolver.absolute(source)
        destination = self.resolver.absolute(destination)
        if not self.fs.is_dir(source):
            raise CopySourceMissing(source)

        target = destination / source.name
        if target.resolve().is_relative_to(source.resolve()):
            raise WriteFailure(target, operation="copy")

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            errors = self._copy_level(source, target, pool)

        if errors:
            for extra in errors[1:]:
                logger.warning("Additional copy failure: %s", extra)
            raise errors[0]
        logger.info("Copied %s to %s", source, target)
        return True

    def _is_link(self, path: Path) -> bool:
        result = self.fs.lstat(path)
        return result.ok and stat.S_ISLNK(result.value.st_mode)

    def _copy_link(self, child: Path, target: Path) -> FsError | None:
        link_target = self.fs.readlink(child)
        if link_target is None or not self.fs.symlink(link_target, target):
            return WriteFailure(target, operation="symlink")
        return None

    def _copy_level(
        self, source: Path, target: Path, pool: ThreadPoolExecutor
    ) -> list[FsError]:
        """Copy one directory level, recursing into subdirectories.

        Subdirectories are walked on the calling thread; only file copies
        go to the pool, so workers never wait on each other. Links to
        directories and dangling links are recreated as links.
        """
        if not self.fs.mkdir(target, recursive=True) and not self.fs.is_dir(target):
            return [WriteFailure(target, operation="mkdir")]

        pending: list[Future[bool]] = []
        subdirs: list[Path] = []
        errors: list[FsError] = []

        for name in sorted(self.fs.list_names(source)):
            child = source / name
            if self._is_link(child) and (self.fs.is_dir(child) or not self.fs.stat(child).ok):
                error = self._copy_link(child, target / name)
                if error is not None:
                    errors.append(error)
            elif self.fs.is_dir(child):
                subdirs.append(child)
            else:
                pending.append(pool.submit(self.fs.copy_file, child, target / name))

        for subdir in subdirs:
            try:
                errors.extend(self._copy_level(subdir, target / subdir.name, pool))
            except FsError as e:
                errors.append(e)

        for future in pending:
            exc = future.exception()
            if isinstance(exc, FsError):
                errors.append(exc)
            elif exc is not None:
                raise exc
        return errors

    def delete_directory(self, directory: Path | str) -> bool:
        """Recursively delete a directory."""
        return self.fs.remove(self.resolver.absolute(directory))

    def delete_all_directories(self, parent: Path | str) -> bool:
        """Delete every directory directly inside ``parent``.

        Stops at the first directory that cannot be removed.

        Raises:
            DirectoryReadError: If ``parent`` cannot be read.
            RemoveFailure: If a directory cannot be removed.
        """
        for directory in self.directories_of(parent):
            self.delete_directory(directory)
        return True

    def clean_directory(self, directory: Path | str, except_names: Iterable[str] = ()) -> bool:
        """Remove every entry of a directory except the named ones.

        Args:
            directory: Directory to empty.
            except_names: Entry names to keep.

        Raises:
            DirectoryReadError: If the directory cannot be read.
            RemoveFailure: If an entry cannot be removed.
        """
        directory = self.resolver.absolute(directory)
        keep = set(except_names)
        doomed = [directory / name for name in self.fs.list_names(directory) if name not in keep]
        self.fs.remove(doomed)
        logger.debug("Cleaned %s (%d removed, kept %s)", directory, len(doomed), sorted(keep))
        return True
