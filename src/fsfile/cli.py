"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from fsfile import __version__
from fsfile.console import Output
from fsfile.errors import CopySourceMissing, FsError
from fsfile.files import FsFile

app = typer.Typer(
    name="fsfile",
    help="Filesystem helpers: list, inspect, copy and clean files",
    no_args_is_help=True,
)

output = Output()

# Options set by the app callback, read when a command builds its helpers
_options: dict[str, Path | None] = {"root": None}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"fsfile v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    root: Annotated[
        Path | None,
        typer.Option("--root", envvar="FSFILE_ROOT", help="Root for relative paths"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Filesystem helpers: list, inspect, copy and clean files."""
    _options["root"] = root
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=output.console, show_path=False)],
        )


def _files(context: FsFile | None) -> FsFile:
    return context or FsFile.create(_options["root"])


def _fail(message: str) -> typer.Exit:
    """Show an error and build the exit to raise."""
    output.show_error(message)
    return typer.Exit(1)


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("ls")
def list_entries(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Descend into subdirectories")] = False,
    all_: Annotated[bool, typer.Option("--all", "-a", help="Include hidden entries")] = False,
    _context=None,
) -> None:
    """List directory entries."""
    files = _files(_context)
    try:
        if recursive:
            entries = files.all_entries(path, hidden=all_)
        else:
            entries = files.files(path, hidden=all_)
    except FsError as e:
        raise _fail(f"Cannot list '{path}': {e}") from e
    output.show_entries(entries, title=path)


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="File or directory")],
    _context=None,
) -> None:
    """Show metadata for a path."""
    files = _files(_context)
    if not files.exists(path):
        raise _fail(f"'{path}' not found")
    output.show_entry(files.describe(path))


@app.command()
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print the contents of a file."""
    files = _files(_context)
    try:
        output.show_text(files.get(path))
    except FsError as e:
        raise _fail(f"Cannot read '{path}'") from e


@app.command("hash")
def hash_file(
    paths: Annotated[list[str], typer.Argument(help="Files to hash")],
    _context=None,
) -> None:
    """Print the MD5 content hash of files."""
    files = _files(_context)
    missing = False
    for path in paths:
        digest = files.hash(path)
        if digest is None:
            output.show_error(f"Cannot read '{path}'")
            missing = True
            continue
        output.show_text(f"{digest}  {path}")
    if missing:
        raise typer.Exit(1)


@app.command()
def size(
    path: Annotated[str, typer.Argument(help="File to measure")],
    human: Annotated[bool, typer.Option("--human", "-h", help="Human readable size")] = False,
    _context=None,
) -> None:
    """Print the size of a file."""
    files = _files(_context)
    if not files.exists(path):
        raise _fail(f"'{path}' not found")
    output.show_text(str(files.size(path, human=human)))


@app.command()
def mime(
    path: Annotated[str, typer.Argument(help="File name or extension")],
    _context=None,
) -> None:
    """Print the mime type for a file name."""
    files = _files(_context)
    mime_type = files.mime_type(path)
    if mime_type is None:
        raise _fail(f"Unknown mime type for '{path}'")
    output.show_text(mime_type)


@app.command()
def root(
    relative: Annotated[str | None, typer.Argument(help="Path to resolve")] = None,
    _context=None,
) -> None:
    """Print the root directory, or a path resolved against it."""
    files = _files(_context)
    output.show_text(str(files.root(relative)))


# ============================================================================
# Mutation Commands
# ============================================================================


@app.command()
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[bool, typer.Option("--parents", "-p", help="Create missing parents")] = False,
    _context=None,
) -> None:
    """Create a directory."""
    files = _files(_context)
    if not files.make_directory(path, recursive=parents):
        raise _fail(f"Could not create '{path}'")
    output.show_success(f"Created '{path}'")


@app.command()
def cp(
    source: Annotated[str, typer.Argument(help="File or directory to copy")],
    target: Annotated[str, typer.Argument(help="Destination")],
    _context=None,
) -> None:
    """Copy a file, or a directory into the destination."""
    files = _files(_context)
    try:
        if files.is_directory(source):
            files.copy_directory(source, target)
        else:
            files.copy(source, target)
    except CopySourceMissing as e:
        raise _fail(f"'{source}' not found") from e
    except FsError as e:
        raise _fail(f"Copy failed: {e}") from e
    output.show_success(f"Copied '{source}' to '{target}'")


@app.command()
def mv(
    source: Annotated[str, typer.Argument(help="Path to move")],
    target: Annotated[str, typer.Argument(help="Destination")],
    _context=None,
) -> None:
    """Move a file or directory."""
    files = _files(_context)
    if not files.move(source, target):
        raise _fail(f"Could not move '{source}' to '{target}'")
    output.show_success(f"Moved '{source}' to '{target}'")


@app.command()
def rm(
    paths: Annotated[list[str], typer.Argument(help="Paths to delete")],
    _context=None,
) -> None:
    """Delete files and directories."""
    files = _files(_context)
    for path in paths:
        if not files.exists(path):
            output.show_warning(f"'{path}' not found, skipping")
    try:
        files.delete(paths)
    except FsError as e:
        raise _fail(f"Delete failed: {e}") from e
    output.show_success(f"Deleted {len(paths)} path(s)")


@app.command()
def clean(
    directory: Annotated[str, typer.Argument(help="Directory to empty")],
    keep: Annotated[
        list[str] | None, typer.Option("--except", "-e", help="Entry name to keep (repeatable)")
    ] = None,
    _context=None,
) -> None:
    """Remove every entry of a directory except the kept names."""
    files = _files(_context)
    try:
        files.clean_directory(directory, keep or [])
    except FsError as e:
        raise _fail(f"Clean failed: {e}") from e
    output.show_success(f"Cleaned '{directory}'")


if __name__ == "__main__":
    app()
