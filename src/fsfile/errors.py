"""Domain errors raised by filesystem operations."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "CopySourceMissing",
    "DirectoryReadError",
    "FsError",
    "ReadFailure",
    "RemoveFailure",
    "WriteFailure",
]


class FsError(Exception):
    """Error during a filesystem operation.

    Attributes:
        operation: Name of the operation that failed.
        path: Path the operation was working on.
    """

    operation = "fs"

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(message or f"{self.operation} error: {path}")


class DirectoryReadError(FsError):
    """A directory could not be enumerated."""

    operation = "readdir"


class ReadFailure(FsError):
    """A file could not be read."""

    operation = "read"


class WriteFailure(FsError):
    """A write, append or prepend could not complete."""

    operation = "write"

    def __init__(self, path: Path | str, operation: str = "write") -> None:
        self.operation = operation
        super().__init__(path)


class RemoveFailure(FsError):
    """A path could not be removed."""

    operation = "rm"


class CopySourceMissing(FsError):
    """The source of a copy does not exist."""

    operation = "copy"

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"copy source not found: {path}")
