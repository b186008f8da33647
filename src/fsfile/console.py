"""Rich console output for the command line."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from fsfile.entry import EntryDescriptor


class Output:
    """Console output helpers for fsfile commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to (a new one if not given).
        """
        self.console = console or Console()

    @staticmethod
    def _kind(entry: EntryDescriptor) -> str:
        if entry.is_symbolic_link:
            return "link"
        if entry.is_directory:
            return "dir"
        if entry.is_file:
            return "file"
        return "other"

    @staticmethod
    def _modified(entry: EntryDescriptor) -> str:
        if entry.last_modified_ms is None:
            return "-"
        moment = datetime.fromtimestamp(entry.last_modified_ms / 1000, tz=timezone.utc)
        return moment.strftime("%Y-%m-%d %H:%M")

    def show_entries(self, entries: list[EntryDescriptor], title: str) -> None:
        """Show entries as a table.

        Args:
            entries: Entries to list.
            title: Table title.
        """
        if not entries:
            self.console.print(f"[yellow]No entries in {title}[/yellow]")
            return

        table = Table(title=title)
        table.add_column("Path", style="cyan")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        table.add_column("Modified")

        for entry in entries:
            name = entry.relative_path
            if entry.is_directory:
                name = f"[bold]{name}/[/bold]"
            table.add_row(
                name,
                self._kind(entry),
                "" if entry.is_directory else (entry.size_human or "-"),
                self._modified(entry),
            )

        self.console.print(table)

    def show_entry(self, entry: EntryDescriptor) -> None:
        """Show every field of one entry."""
        table = Table(title=entry.name, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Path", str(entry.absolute_path))
        table.add_row("Relative", entry.relative_path)
        table.add_row("Stem", entry.stem)
        table.add_row("Extension", entry.extension or "-")
        table.add_row("Type", self._kind(entry))
        table.add_row("Hidden", "yes" if entry.is_hidden else "no")
        table.add_row("Size", f"{entry.size_bytes} ({entry.size_human})" if entry.size_bytes is not None else "-")
        table.add_row("Modified", self._modified(entry))
        self.console.print(table)

    def show_text(self, text: str) -> None:
        """Print text without markup processing."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")
