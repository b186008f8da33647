"""High-level file helper facade.

``FsFile`` exposes the full set of file and directory helpers bound to one
``FsContext``. Relative paths resolve against the context root. Queries
return plain values, ``None`` or False; mutations return True or raise an
``FsError``.
"""

from __future__ import annotations

import glob as globlib
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from fsfile import hashing, mime
from fsfile.context import FsContext, create_context
from fsfile.entry import EntryDescriptor, split_name
from fsfile.errors import ReadFailure
from fsfile.types import Replacement

logger = logging.getLogger(__name__)

PathLike = str | Path


class FsFile:
    """File and directory helpers bound to a context."""

    def __init__(self, context: FsContext) -> None:
        self.context = context
        self.fs = context.filesystem
        self.resolver = context.resolver
        self.walker = context.walker
        self.tree = context.tree

    @classmethod
    def create(cls, root: Path | None = None) -> FsFile:
        """Create helpers rooted at ``root`` (default: working directory)."""
        return cls(create_context(root=root))

    def _abs(self, path: PathLike) -> Path:
        return self.resolver.absolute(path)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def root(self, relative: PathLike | None = None) -> Path:
        """Get the root, or a path relative to it."""
        return self.resolver.root(relative)

    def package(self, relative: PathLike) -> Path:
        """Get a path relative to the package directory."""
        return self.resolver.package(relative)

    @staticmethod
    def filename(path: PathLike, with_extension: bool = True) -> str:
        """Extract the file name from a path.

        Args:
            path: File path.
            with_extension: Keep the trailing extension segment.
        """
        name = Path(path).name
        if with_extension:
            return name
        return split_name(name)[0]

    @staticmethod
    def dirname(path: PathLike) -> Path:
        """Extract the parent directory from a path."""
        return Path(path).parent

    @staticmethod
    def extension(path: PathLike) -> str | None:
        """Extract the extension from a path, None if it has no dot."""
        return split_name(Path(path).name)[1]

    def describe(self, path: PathLike) -> EntryDescriptor:
        """Get a metadata snapshot for one path."""
        return EntryDescriptor.from_path(path, self.resolver, self.fs)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, path: PathLike) -> bool:
        """Determine if a file or directory exists."""
        return self.fs.exists(self._abs(path))

    def get(self, path: PathLike) -> str:
        """Get the contents of a file.

        Raises:
            ReadFailure: If the file is missing or unreadable.
        """
        result = self.fs.read(self._abs(path))
        if not result.ok:
            raise ReadFailure(result.path, f"read error: {result.path}")
        return result.value

    def lines(self, path: PathLike) -> list[str] | None:
        """Get the lines of a file, None if it cannot be read."""
        result = self.fs.read(self._abs(path))
        if not result.ok:
            return None
        return result.value.split("\n")

    def hash(self, path: PathLike) -> str | None:
        """Get the MD5 hash of a file, None if it cannot be read."""
        return hashing.file_hash(self.fs, self._abs(path))

    def has_same_hash(self, first: PathLike, second: PathLike) -> bool:
        """Determine if two readable files have the same content."""
        first_hash = self.hash(first)
        if first_hash is None:
            return False
        return first_hash == self.hash(second)

    def string_exists_in_file(self, path: PathLike, needle: str) -> bool:
        """Determine if a file contains a string."""
        result = self.fs.read(self._abs(path))
        return result.ok and needle in result.value

    def type(self, path: PathLike) -> str | None:
        """Get the content type of a file, including charset for text."""
        return mime.content_type(path)

    def mime_type(self, path: PathLike) -> str | None:
        """Get the mime type of a file."""
        return mime.lookup(path)

    def size(self, path: PathLike, human: bool = False) -> int | str:
        """Get the size of a file.

        Args:
            path: File path.
            human: Return a formatted string such as ``"1.5 kB"``.

        Returns:
            Size in bytes (0 when missing), or the formatted size.
        """
        path = self._abs(path)
        if human:
            return self.fs.bytes_human(path)
        result = self.fs.stat(path)
        return result.value.st_size if result.ok else 0

    def last_modified(self, path: PathLike) -> datetime | None:
        """Get the file's last modification time."""
        result = self.fs.stat(self._abs(path))
        if not result.ok:
            return None
        return datetime.fromtimestamp(result.value.st_mtime, tz=timezone.utc)

    def is_directory(self, path: PathLike) -> bool:
        return self.fs.is_dir(self._abs(path))

    def is_file(self, path: PathLike) -> bool:
        return self.fs.is_file(self._abs(path))

    def is_empty_directory(self, directory: PathLike, ignore_dot_files: bool = False) -> bool:
        """Determine if a directory contains no files or directories."""
        return self.tree.is_empty_directory(directory, ignore_dot_files)

    def is_readable(self, path: PathLike) -> bool:
        return self.fs.access(self._abs(path), readable=True)

    def is_writable(self, path: PathLike) -> bool:
        return self.fs.access(self._abs(path), readable=True, writable=True)

    def glob(self, patterns: str | Iterable[str]) -> list[Path]:
        """Find paths matching glob patterns.

        Relative patterns are matched under the root; ``**`` recurses.

        Returns:
            Sorted, de-duplicated absolute paths.
        """
        if isinstance(patterns, str):
            patterns = [patterns]
        root = self.resolver.root()
        found: set[Path] = set()
        for pattern in patterns:
            for match in globlib.glob(pattern, root_dir=root, recursive=True):
                found.add(root / match)
        return sorted(found)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def files(self, directory: PathLike, hidden: bool = False) -> list[EntryDescriptor]:
        """Get the entries directly inside a directory.

        Raises:
            DirectoryReadError: If the directory cannot be read.
        """
        return self.walker.list_immediate(directory, include_hidden=hidden)

    def all_entries(self, directory: PathLike, hidden: bool = False) -> list[EntryDescriptor]:
        """Get every entry below a directory, depth-first, directories included."""
        return self.walker.list_recursive(directory, include_hidden=hidden)

    def all_files(self, directory: PathLike, hidden: bool = False) -> list[EntryDescriptor]:
        """Get every non-directory entry below a directory, depth-first."""
        return [
            entry
            for entry in self.walker.iter_recursive(directory, include_hidden=hidden)
            if not entry.is_directory
        ]

    def all_files_with_extensions(
        self,
        directory: PathLike,
        extensions: str | Iterable[str],
        hidden: bool = False,
    ) -> list[EntryDescriptor]:
        """Get every file below a directory whose extension is listed.

        Example:
            >>> files.all_files_with_extensions("docs", ["md", "rst"])  # doctest: +SKIP
        """
        if isinstance(extensions, str):
            extensions = [extensions]
        wanted = {ext.lstrip(".") for ext in extensions}
        return [
            entry
            for entry in self.all_files(directory, hidden=hidden)
            if entry.extension is not None and entry.extension in wanted
        ]

    def directories(self, directory: PathLike) -> list[Path]:
        """Get all of the directories within a given directory."""
        return self.tree.directories_of(directory)

    # ------------------------------------------------------------------
    # File mutations
    # ------------------------------------------------------------------

    def put(self, path: PathLike, contents: str | bytes) -> bool:
        """Write the contents of a file, creating parent directories."""
        return self.fs.write(self._abs(path), contents)

    def append(self, path: PathLike, data: str | bytes) -> bool:
        return self.fs.append(self._abs(path), data)

    def prepend(self, path: PathLike, data: str) -> bool:
        return self.fs.prepend(self._abs(path), data)

    def replace_in_file(self, path: PathLike, search: str, replace: str) -> bool:
        """Replace the first occurrence of a string within a file.

        Raises:
            ReadFailure: If the file cannot be read.
        """
        content = self.get(path)
        if search not in content:
            logger.warning("replace_in_file: %r not found in %s", search, path)
            return False
        return self.put(path, content.replace(search, replace, 1))

    def replace_in_file_bulk(
        self, from_path: PathLike, to_path: PathLike, replacements: Iterable[Replacement]
    ) -> bool:
        """Apply replacements in order and write the result to ``to_path``.

        Every occurrence of each search string is replaced.

        Raises:
            ReadFailure: If ``from_path`` cannot be read.
        """
        content = self.get(from_path)
        for replacement in replacements:
            content = content.replace(replacement.search, replacement.replace)
        return self.put(to_path, content)

    def chmod(self, path: PathLike, mode: int = 0o777) -> bool:
        """Set UNIX mode of a file or directory."""
        return self.fs.chmod(self._abs(path), mode)

    def delete(self, paths: PathLike | Iterable[PathLike]) -> bool:
        """Delete files or directories; missing paths are ignored."""
        if isinstance(paths, (str, Path)):
            return self.fs.remove(self._abs(paths))
        return self.fs.remove([self._abs(p) for p in paths])

    def move(self, path: PathLike, target: PathLike) -> bool:
        return self.fs.rename(self._abs(path), self._abs(target))

    def copy(self, path: PathLike, target: PathLike) -> bool:
        """Copy a file; a directory target receives the file by name."""
        return self.fs.copy_file(self._abs(path), self._abs(target))

    def link(self, target: PathLike, link: PathLike) -> bool:
        """Create a symlink at ``link`` pointing to ``target``."""
        return self.fs.symlink(self._abs(target), self._abs(link))

    def add_to_gitignore(self, entry: str, path: PathLike = ".gitignore") -> bool:
        """Add an entry to an ignore file unless already present.

        Absolute entries under the root are stored relative to it.

        Returns:
            True if the entry was added.
        """
        if Path(entry).is_absolute():
            entry = self.resolver.relative(entry)
        ignore_file = self._abs(path)
        if not self.exists(ignore_file):
            self.put(ignore_file, "")
        line = f"\n{entry}\n"
        if line in self.get(ignore_file):
            return False
        return self.append(ignore_file, line)

    # ------------------------------------------------------------------
    # Directory mutations
    # ------------------------------------------------------------------

    def ensure_directory_exists(self, path: PathLike) -> bool:
        return self.tree.ensure_directory_exists(path)

    def make_directory(self, path: PathLike, recursive: bool = False) -> bool:
        return self.tree.make_directory(path, recursive)

    def move_directory(self, source: PathLike, target: PathLike) -> bool:
        return self.tree.move_directory(source, target)

    def copy_directory(self, directory: PathLike, destination: PathLike) -> bool:
        """Copy a directory into ``destination/<basename(directory)>``."""
        return self.tree.copy_directory(directory, destination)

    def delete_directory(self, directory: PathLike) -> bool:
        return self.tree.delete_directory(directory)

    def delete_directories(self, directory: PathLike) -> bool:
        """Remove all of the directories within a given directory."""
        return self.tree.delete_all_directories(directory)

    def clean_directory(self, directory: PathLike, except_names: Iterable[str] = ()) -> bool:
        """Empty a directory of all entries except the named ones."""
        return self.tree.clean_directory(directory, except_names)
