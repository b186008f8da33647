"""Directory enumeration producing entry descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from fsfile.entry import EntryDescriptor
from fsfile.paths import PathResolver
from fsfile.protocols import FileSystem

logger = logging.getLogger(__name__)


class TreeWalker:
    """Lists directory contents, one level or depth-first.

    Siblings are visited in name order. Links to directories are followed;
    a link back to a directory on the current path is listed but not
    descended into.
    """

    def __init__(self, filesystem: FileSystem, resolver: PathResolver) -> None:
        self.fs = filesystem
        self.resolver = resolver

    def _children(self, directory: Path, include_hidden: bool) -> list[EntryDescriptor]:
        names = sorted(self.fs.list_names(directory))
        entries = []
        for name in names:
            if not include_hidden and name.startswith("."):
                continue
            entries.append(EntryDescriptor.from_path(directory / name, self.resolver, self.fs))
        return entries

    def list_immediate(
        self, directory: Path | str, include_hidden: bool = False
    ) -> list[EntryDescriptor]:
        """List the entries directly inside a directory.

        Args:
            directory: Directory to list.
            include_hidden: Include entries whose name starts with a dot.

        Returns:
            Descriptors in name order.

        Raises:
            DirectoryReadError: If the directory cannot be read.
        """
        return self._children(self.resolver.absolute(directory), include_hidden)

    def _identity(self, directory: Path) -> tuple[int, int] | None:
        result = self.fs.stat(directory)
        if not result.ok:
            return None
        return (result.value.st_dev, result.value.st_ino)

    def _walk(
        self, directory: Path, include_hidden: bool, ancestors: frozenset[tuple[int, int]]
    ) -> Iterator[EntryDescriptor]:
        for entry in self._children(directory, include_hidden):
            yield entry
            if not entry.is_directory:
                continue
            identity = self._identity(entry.absolute_path)
            if identity is None:
                continue
            if identity in ancestors:
                logger.debug("Skipping directory cycle at %s", entry.absolute_path)
                continue
            yield from self._walk(entry.absolute_path, include_hidden, ancestors | {identity})

    def iter_recursive(
        self, directory: Path | str, include_hidden: bool = False
    ) -> Iterator[EntryDescriptor]:
        """Yield every descendant of a directory, depth-first.

        Each directory is yielded before its own children. Hidden
        directories are skipped with their whole subtree unless
        ``include_hidden`` is set. Links resolving to directories are
        descended into, except when they lead back to a directory already
        on the current path.

        Raises:
            DirectoryReadError: If any directory in the tree cannot be read.
        """
        directory = self.resolver.absolute(directory)
        identity = self._identity(directory)
        ancestors = frozenset() if identity is None else frozenset({identity})
        yield from self._walk(directory, include_hidden, ancestors)

    def list_recursive(
        self, directory: Path | str, include_hidden: bool = False
    ) -> list[EntryDescriptor]:
        """List every descendant of a directory, depth-first.

        Raises:
            DirectoryReadError: If any directory in the tree cannot be read.
        """
        entries = list(self.iter_recursive(directory, include_hidden))
        logger.debug("Listed %d entries under %s", len(entries), directory)
        return entries
