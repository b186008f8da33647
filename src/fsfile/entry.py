"""Metadata snapshot of a single filesystem entry."""

from __future__ import annotations

import stat as stat_mode
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fsfile.native import format_size

if TYPE_CHECKING:
    from fsfile.paths import PathResolver
    from fsfile.protocols import FileSystem

__all__ = ["EntryDescriptor", "split_name"]


def split_name(name: str) -> tuple[str, str | None]:
    """Split a base name into stem and extension.

    The extension is the last dot-delimited segment. Names without a dot
    have no extension.

    Example:
        >>> split_name("archive.tar.gz")
        ('archive.tar', 'gz')
        >>> split_name("Makefile")
        ('Makefile', None)
    """
    if "." not in name:
        return name, None
    stem, _, extension = name.rpartition(".")
    return stem, extension


@dataclass(frozen=True)
class EntryDescriptor:
    """A file, directory or link found during enumeration.

    Metadata is captured once at construction and never refreshed.

    Attributes:
        name: Base name including extension.
        stem: Name without the trailing extension segment.
        absolute_path: Absolute path of the entry.
        relative_path: Path relative to the resolver root.
        extension: Last dot segment of the name, if any.
        is_directory: Entry is a directory (or a link to one).
        is_file: Entry is a regular file (or a link to one).
        is_symbolic_link: Entry itself is a symbolic link.
        is_hidden: Name starts with a dot.
        last_modified_ms: Modification time in epoch milliseconds.
        size_bytes: Size in bytes.
        size_human: Size formatted with base-1024 units.
    """

    name: str
    stem: str
    absolute_path: Path
    relative_path: str
    extension: str | None = None
    is_directory: bool = False
    is_file: bool = False
    is_symbolic_link: bool = False
    is_hidden: bool = False
    last_modified_ms: float | None = None
    size_bytes: int | None = None
    size_human: str | None = None

    @classmethod
    def from_path(
        cls, path: Path | str, resolver: PathResolver, filesystem: FileSystem
    ) -> EntryDescriptor:
        """Build a descriptor by probing the filesystem once.

        Args:
            path: Absolute path, or a path relative to the resolver root.
            resolver: Resolver providing the root.
            filesystem: Filesystem used for the metadata probe.

        Returns:
            Descriptor for the entry. Metadata fields are None when the
            entry could not be probed.
        """
        absolute = resolver.absolute(path)
        name = absolute.name
        stem, extension = split_name(name)

        link = filesystem.lstat(absolute)
        is_link = link.ok and stat_mode.S_ISLNK(link.value.st_mode)
        info = filesystem.stat(absolute)
        if not info.ok:
            return cls(
                name=name,
                stem=stem,
                absolute_path=absolute,
                relative_path=resolver.relative(absolute),
                extension=extension,
                is_symbolic_link=is_link,
                is_hidden=name.startswith("."),
            )

        st = info.value
        return cls(
            name=name,
            stem=stem,
            absolute_path=absolute,
            relative_path=resolver.relative(absolute),
            extension=extension,
            is_directory=stat_mode.S_ISDIR(st.st_mode),
            is_file=stat_mode.S_ISREG(st.st_mode),
            is_symbolic_link=is_link,
            is_hidden=name.startswith("."),
            last_modified_ms=st.st_mtime_ns / 1_000_000,
            size_bytes=st.st_size,
            size_human=format_size(st.st_size),
        )
