"""Asynchronous facade over ``FsFile``.

Each I/O operation runs in a worker thread via ``asyncio.to_thread`` so the
event loop is never blocked for the duration of the native I/O. There is
no locking between calls: concurrent writers to one path race and the
last write wins.

Pure path and mime helpers (``root``, ``filename``, ``mime_type`` ...) do no
I/O and are used directly from ``AsyncFsFile.sync``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from fsfile.entry import EntryDescriptor
from fsfile.files import FsFile, PathLike
from fsfile.types import Replacement


class AsyncFsFile:
    """Awaitable file and directory helpers."""

    def __init__(self, files: FsFile) -> None:
        self.sync = files

    @classmethod
    def create(cls, root: Path | None = None) -> AsyncFsFile:
        return cls(FsFile.create(root))

    async def describe(self, path: PathLike) -> EntryDescriptor:
        return await asyncio.to_thread(self.sync.describe, path)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def exists(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.exists, path)

    async def get(self, path: PathLike) -> str:
        return await asyncio.to_thread(self.sync.get, path)

    async def lines(self, path: PathLike) -> list[str] | None:
        return await asyncio.to_thread(self.sync.lines, path)

    async def hash(self, path: PathLike) -> str | None:
        return await asyncio.to_thread(self.sync.hash, path)

    async def has_same_hash(self, first: PathLike, second: PathLike) -> bool:
        """Hash both files concurrently and compare."""
        first_hash, second_hash = await asyncio.gather(self.hash(first), self.hash(second))
        return first_hash is not None and first_hash == second_hash

    async def string_exists_in_file(self, path: PathLike, needle: str) -> bool:
        return await asyncio.to_thread(self.sync.string_exists_in_file, path, needle)

    async def size(self, path: PathLike, human: bool = False) -> int | str:
        return await asyncio.to_thread(self.sync.size, path, human)

    async def last_modified(self, path: PathLike) -> datetime | None:
        return await asyncio.to_thread(self.sync.last_modified, path)

    async def is_directory(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.is_directory, path)

    async def is_file(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.is_file, path)

    async def is_empty_directory(
        self, directory: PathLike, ignore_dot_files: bool = False
    ) -> bool:
        return await asyncio.to_thread(self.sync.is_empty_directory, directory, ignore_dot_files)

    async def is_readable(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.is_readable, path)

    async def is_writable(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.is_writable, path)

    async def glob(self, patterns: str | Iterable[str]) -> list[Path]:
        if not isinstance(patterns, str):
            patterns = list(patterns)
        return await asyncio.to_thread(self.sync.glob, patterns)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def files(self, directory: PathLike, hidden: bool = False) -> list[EntryDescriptor]:
        """List the entries directly inside a directory."""
        return await asyncio.to_thread(self.sync.files, directory, hidden)

    async def all_entries(
        self, directory: PathLike, hidden: bool = False
    ) -> list[EntryDescriptor]:
        return await asyncio.to_thread(self.sync.all_entries, directory, hidden)

    async def all_files(self, directory: PathLike, hidden: bool = False) -> list[EntryDescriptor]:
        return await asyncio.to_thread(self.sync.all_files, directory, hidden)

    async def all_files_with_extensions(
        self,
        directory: PathLike,
        extensions: str | Iterable[str],
        hidden: bool = False,
    ) -> list[EntryDescriptor]:
        if not isinstance(extensions, str):
            extensions = list(extensions)
        return await asyncio.to_thread(
            self.sync.all_files_with_extensions, directory, extensions, hidden
        )

    async def directories(self, directory: PathLike) -> list[Path]:
        return await asyncio.to_thread(self.sync.directories, directory)

    # ------------------------------------------------------------------
    # File mutations
    # ------------------------------------------------------------------

    async def put(self, path: PathLike, contents: str | bytes) -> bool:
        return await asyncio.to_thread(self.sync.put, path, contents)

    async def append(self, path: PathLike, data: str | bytes) -> bool:
        return await asyncio.to_thread(self.sync.append, path, data)

    async def prepend(self, path: PathLike, data: str) -> bool:
        return await asyncio.to_thread(self.sync.prepend, path, data)

    async def replace_in_file(self, path: PathLike, search: str, replace: str) -> bool:
        return await asyncio.to_thread(self.sync.replace_in_file, path, search, replace)

    async def replace_in_file_bulk(
        self, from_path: PathLike, to_path: PathLike, replacements: Iterable[Replacement]
    ) -> bool:
        return await asyncio.to_thread(
            self.sync.replace_in_file_bulk, from_path, to_path, list(replacements)
        )

    async def chmod(self, path: PathLike, mode: int = 0o777) -> bool:
        return await asyncio.to_thread(self.sync.chmod, path, mode)

    async def delete(self, paths: PathLike | Iterable[PathLike]) -> bool:
        if not isinstance(paths, (str, Path)):
            paths = list(paths)
        return await asyncio.to_thread(self.sync.delete, paths)

    async def move(self, path: PathLike, target: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.move, path, target)

    async def copy(self, path: PathLike, target: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.copy, path, target)

    async def link(self, target: PathLike, link: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.link, target, link)

    async def add_to_gitignore(self, entry: str, path: PathLike = ".gitignore") -> bool:
        return await asyncio.to_thread(self.sync.add_to_gitignore, entry, path)

    # ------------------------------------------------------------------
    # Directory mutations
    # ------------------------------------------------------------------

    async def ensure_directory_exists(self, path: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.ensure_directory_exists, path)

    async def make_directory(self, path: PathLike, recursive: bool = False) -> bool:
        return await asyncio.to_thread(self.sync.make_directory, path, recursive)

    async def move_directory(self, source: PathLike, target: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.move_directory, source, target)

    async def copy_directory(self, directory: PathLike, destination: PathLike) -> bool:
        """Copy a directory; completes only after every child copy has finished."""
        return await asyncio.to_thread(self.sync.copy_directory, directory, destination)

    async def delete_directory(self, directory: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.delete_directory, directory)

    async def delete_directories(self, directory: PathLike) -> bool:
        return await asyncio.to_thread(self.sync.delete_directories, directory)

    async def clean_directory(
        self, directory: PathLike, except_names: Iterable[str] = ()
    ) -> bool:
        return await asyncio.to_thread(self.sync.clean_directory, directory, list(except_names))
