"""Filesystem helpers: existence checks, read/write, copy/move/delete and tree walking."""

__version__ = "0.1.0"

from fsfile.context import FsContext, create_context
from fsfile.entry import EntryDescriptor
from fsfile.errors import (
    CopySourceMissing,
    DirectoryReadError,
    FsError,
    ReadFailure,
    RemoveFailure,
    WriteFailure,
)
from fsfile.files import FsFile
from fsfile.protocols import FileSystem
from fsfile.types import FsResult, Replacement, Status

__all__ = [
    "__version__",
    "CopySourceMissing",
    "DirectoryReadError",
    "EntryDescriptor",
    "FileSystem",
    "FsContext",
    "FsError",
    "FsFile",
    "FsResult",
    "ReadFailure",
    "RemoveFailure",
    "Replacement",
    "Status",
    "WriteFailure",
    "create_context",
]
