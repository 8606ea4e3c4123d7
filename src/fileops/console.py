"""Rich output for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from fileops.config import Settings
    from fileops.types import FileInfo


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


class TUI:
    """Text User Interface for fileops."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_line(self, line: str, number: int | None = None) -> None:
        """Print one line of file content verbatim.

        Args:
            line: Line without terminator.
            number: Optional 1-based line number shown as a gutter.
        """
        if number is None:
            self.console.print(line, markup=False, highlight=False)
        else:
            self.console.print(f"[dim]{number:>4}[/dim] {escape(line)}", highlight=False)

    def show_file_info(self, info: FileInfo) -> None:
        """Display file attributes table.

        Args:
            info: Attributes to show.
        """
        if not info.exists:
            self.console.print(f"[yellow]{escape(str(info.path))} does not exist[/yellow]")
            return

        kind = "directory" if info.is_dir else "file" if info.is_file else "other"
        modified = info.modified.strftime("%Y-%m-%d %H:%M:%S %Z") if info.modified else "-"

        table = Table(title=escape(str(info.path)), show_header=False)
        table.add_column("Attribute", style="cyan")
        table.add_column("Value")
        table.add_row("Type", kind)
        table.add_row("Size", f"{info.size} bytes")
        table.add_row("Modified", modified)
        table.add_row("Readable", _flag(info.readable))
        table.add_row("Writable", _flag(info.writable))
        table.add_row("Executable", _flag(info.executable))
        table.add_row("Hidden", _flag(info.hidden))

        self.console.print(table)

    def show_settings(self, settings: Settings, location: str) -> None:
        """Display current configuration.

        Args:
            settings: Loaded settings.
            location: Path of the config file.
        """
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Config file: {escape(location)}")
        self.console.print(f"  Encoding: {settings.encoding}")
        self.console.print(f"  Buffer size: {settings.buffer_size}")
        self.console.print(f"  Newline: {settings.newline_name}")
        self.console.print(f"  Create parents: {settings.create_parents}")

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {escape(message)}")
