"""Mime type lookup by file extension."""

from __future__ import annotations

import mimetypes
from pathlib import Path

# Types missing from some platform tables
mimetypes.add_type("text/markdown", ".md")
mimetypes.add_type("text/markdown", ".markdown")
mimetypes.add_type("application/x-yaml", ".yaml")
mimetypes.add_type("application/x-yaml", ".yml")

TEXT_APPLICATION_TYPES = {"application/json", "application/javascript", "application/xml"}


def lookup(path: str | Path) -> str | None:
    """Get the mime type for a path or bare extension.

    Example:
        >>> lookup("notes.md")
        'text/markdown'
        >>> lookup("json")
        'application/json'
    """
    name = str(path)
    if "." not in name and "/" not in name:
        name = f"file.{name}"
    mime_type, _ = mimetypes.guess_type(name, strict=False)
    return mime_type


def content_type(path: str | Path) -> str | None:
    """Get a full content-type header value, with charset for text types."""
    mime_type = lookup(path)
    if mime_type is None:
        return None
    if mime_type.startswith("text/") or mime_type in TEXT_APPLICATION_TYPES:
        return f"{mime_type}; charset=utf-8"
    return mime_type
