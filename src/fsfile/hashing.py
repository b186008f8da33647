"""Content hashing for file equality checks.

MD5 is used for comparing contents only, never for security.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from fsfile.protocols import FileSystem


def md5_hex(content: str | bytes) -> str:
    """Get the MD5 hex digest of some content.

    Text is encoded as UTF-8 before hashing.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def file_hash(filesystem: FileSystem, path: Path) -> str | None:
    """Get the MD5 hex digest of a file's content.

    Args:
        filesystem: Filesystem to read through.
        path: Path to the file.

    Returns:
        Hex digest, or None if the file cannot be read.
    """
    result = filesystem.read_bytes(path)
    if not result.ok:
        return None
    return md5_hex(result.value)
