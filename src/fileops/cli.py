"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fileops.context import AppContext
    from fileops.types import OperationResult

import typer
from rich.console import Console
from rich.logging import RichHandler

from fileops import __version__
from fileops.console import TUI
from fileops.context import create_context
from fileops.errors import FileOpsError
from fileops.example import DEFAULT_EXAMPLE_PATH, run_example
from fileops.operations import FileOperations

app = typer.Typer(
    name="fileops",
    help="Create, read, write and delete text files",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

console = Console()
tui = TUI(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fileops v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
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
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log every filesystem operation")
    ] = False,
) -> None:
    """Create, read, write and delete text files."""
    configure_logging(verbose)


def _load_context(context: AppContext | None) -> AppContext:
    """Return the injected context or build the default one.

    Raises:
        typer.Exit: If the stored configuration is invalid.
    """
    if context is not None:
        return context
    try:
        return create_context()
    except ValueError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


def _report(result: OperationResult) -> None:
    """Print an operation result, exiting with status 1 on failure."""
    if not result.success:
        tui.show_error(result.error or f"{result.operation} failed")
        raise typer.Exit(1)
    if result.changed:
        tui.show_success(result.detail or f"{result.operation} succeeded")
    else:
        tui.show_warning(result.detail or f"{result.operation} made no changes")


# ============================================================================
# File Commands
# ============================================================================


@app.command()
def create(
    path: Annotated[Path, typer.Argument(help="File to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parent directories")
    ] = False,
    _context=None,
) -> None:
    """Create an empty file."""
    ctx = _load_context(_context)
    _report(FileOperations(ctx.filesystem).create(path, parents=parents))


@app.command()
def write(
    path: Annotated[Path, typer.Argument(help="File to write")],
    text: Annotated[str | None, typer.Argument(help="Text to write as-is")] = None,
    line: Annotated[
        list[str] | None,
        typer.Option("--line", "-l", help="Line to write (repeatable)"),
    ] = None,
    append: Annotated[
        bool, typer.Option("--append", "-a", help="Append instead of overwriting")
    ] = False,
    _context=None,
) -> None:
    """Write text or lines to a file."""
    if (text is None) == (not line):
        tui.show_error("Provide either TEXT or one or more --line options")
        raise typer.Exit(1)

    ctx = _load_context(_context)
    ops = FileOperations(ctx.filesystem)
    _report(ops.write(path, text=text, lines=line or None, append=append))


@app.command()
def read(
    path: Annotated[Path, typer.Argument(help="File to read")],
    numbered: Annotated[
        bool, typer.Option("--numbered", "-n", help="Prefix each line with its number")
    ] = False,
    _context=None,
) -> None:
    """Print a file line by line."""
    ctx = _load_context(_context)
    try:
        for number, content in enumerate(ctx.filesystem.read_lines(path), 1):
            tui.show_line(content, number if numbered else None)
    except FileOpsError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def delete(
    path: Annotated[Path, typer.Argument(help="File to delete")],
    _context=None,
) -> None:
    """Delete a file. A missing file is reported, not treated as an error."""
    ctx = _load_context(_context)
    _report(FileOperations(ctx.filesystem).delete(path))


@app.command()
def info(
    path: Annotated[Path, typer.Argument(help="Path to inspect")],
    _context=None,
) -> None:
    """Show the attributes of a path."""
    ctx = _load_context(_context)
    try:
        file_info = ctx.filesystem.info(path)
    except FileOpsError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_file_info(file_info)


@app.command()
def example(
    path: Annotated[
        Path, typer.Argument(help="Scratch file used by the walkthrough")
    ] = DEFAULT_EXAMPLE_PATH,
    _context=None,
) -> None:
    """Write a file, read it back line by line, then delete it."""
    ctx = _load_context(_context)
    try:
        report = run_example(ctx.filesystem, path, echo=tui.show_line)
    except FileOpsError as e:
        tui.show_error(f"Example failed: {e}")
        raise typer.Exit(1) from e

    if not report.round_trip_ok:
        tui.show_error("Content read back differs from content written")
        raise typer.Exit(1)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _load_context(_context)
    tui.show_settings(ctx.config.load(), str(ctx.config.config_file))


@config_app.command("set")
def config_set(
    key: Annotated[
        str,
        typer.Argument(help="Configuration key (encoding, buffer-size, newline, create-parents)"),
    ],
    value: Annotated[str, typer.Argument(help="Configuration value")],
    _context=None,
) -> None:
    """Set a configuration value."""
    ctx = _load_context(_context)
    try:
        ctx.config.set(key, value)
    except ValueError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Set {key} to {value}")


if __name__ == "__main__":
    app()
