"""End-to-end walkthrough: write a file, read it back, print it, delete it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from fileops.errors import FileOpsError
from fileops.protocols import FileSystem
from fileops.types import ExampleReport

logger = logging.getLogger(__name__)

DEFAULT_EXAMPLE_PATH = Path("exemplo.txt")
DEFAULT_EXAMPLE_LINES = ("Olá, mundo!", "Manipulação de arquivos.")


def run_example(
    fs: FileSystem,
    path: Path = DEFAULT_EXAMPLE_PATH,
    lines: Sequence[str] = DEFAULT_EXAMPLE_LINES,
    echo: Callable[[str], None] = print,
) -> ExampleReport:
    """Write lines to a file, echo them back one by one, then delete the file.

    Each step opens and releases its own handle, so a failure in one step
    never leaves a file open. The file read and deleted is always the file
    that was just written.

    Args:
        fs: Filesystem to operate on.
        path: File to use for the walkthrough.
        lines: Lines to write.
        echo: Receives every line read and the final deletion message.

    Returns:
        ExampleReport describing what was written, read and deleted.

    Raises:
        FileOpsError: If any step fails.
    """
    report = ExampleReport(path=path, lines_written=list(lines))

    try:
        fs.write_lines(path, report.lines_written)
        for line in fs.read_lines(path):
            report.lines_read.append(line)
            echo(line)
        report.deleted = fs.delete(path)
    except FileOpsError:
        logger.exception("Example failed for %s", path)
        raise

    if report.deleted:
        echo(f"Deleted file: {path}")
    else:
        echo(f"Nothing to delete at {path}")
    return report
