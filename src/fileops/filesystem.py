"""Filesystem operations on single text files.

This module provides the production implementation of the FileSystem
protocol. Every handle is opened inside a ``with`` block so it is closed
on all exit paths, text is always read and written with an explicit
encoding, and OS errors are re-raised as the fileops error taxonomy.
"""

from __future__ import annotations

import codecs
import logging
import os
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from fileops.errors import FileOpsError, translate_errors
from fileops.types import FileInfo

if TYPE_CHECKING:
    from fileops.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_BUFFER_SIZE = 8192
DEFAULT_NEWLINE = "\n"

# Terminators recognised when splitting lines, longest first
LINE_TERMINATORS = ("\r\n", "\n", "\r")


def check_text_encoding(encoding: str) -> str:
    """Return the encoding name if it is a known text encoding.

    Raises:
        ValueError: If the codec is unknown or is a bytes-to-bytes codec
            such as rot13, hex or base64.
    """
    try:
        info = codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"Unknown encoding: {encoding}") from e
    if not getattr(info, "_is_text_encoding", True):
        raise ValueError(f"Not a text encoding: {encoding}")
    return encoding


def _strip_terminator(line: str) -> str:
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


class RealFileSystem:
    """Production filesystem implementation.

    Wraps built-in ``open`` and pathlib operations.
    Satisfies the FileSystem protocol structurally.
    """

    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        newline: str = DEFAULT_NEWLINE,
        create_parents: bool = False,
    ) -> None:
        """Initialize the filesystem.

        Args:
            encoding: Text encoding used for every read and write.
            buffer_size: Buffer size in bytes handed to ``open``.
            newline: Line terminator written after each line.
            create_parents: Create missing parent directories on write.

        Raises:
            ValueError: If buffer_size is not positive or encoding is not a
                text encoding.
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.encoding = check_text_encoding(encoding)
        self.buffer_size = buffer_size
        self.newline = newline
        self.create_parents = create_parents

    @classmethod
    def from_settings(cls, settings: Settings) -> RealFileSystem:
        """Create a filesystem configured from persisted settings."""
        return cls(
            encoding=settings.encoding,
            buffer_size=settings.buffer_size,
            newline=settings.newline,
            create_parents=settings.create_parents,
        )

    def _prepare_parent(self, path: Path) -> None:
        if self.create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

    def create_file(self, path: Path, parents: bool = False) -> bool:
        """Create an empty file.

        Args:
            path: File to create.
            parents: Create missing parent directories first.

        Returns:
            True if the file was created, False if it already existed.
        """
        with translate_errors("create", path):
            if parents or self.create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)
            try:
                with open(path, "x", encoding=self.encoding):
                    pass
            except FileExistsError:
                logger.debug("File already exists: %s", path)
                return False
        logger.debug("Created file: %s", path)
        return True

    def write_text(self, path: Path, content: str, append: bool = False) -> None:
        """Write text content to a file, replacing it unless append is set.

        Content is stored exactly as given; line endings are not translated.
        """
        mode = "a" if append else "w"
        with translate_errors("write", path):
            self._prepare_parent(path)
            with open(
                path,
                mode,
                encoding=self.encoding,
                newline="",
                buffering=self.buffer_size,
            ) as f:
                f.write(content)
        logger.debug("Wrote %d characters to %s (mode=%s)", len(content), path, mode)

    def write_lines(self, path: Path, lines: Iterable[str], append: bool = False) -> int:
        """Write lines to a file through a buffered writer.

        Each line is followed by the configured line terminator.

        Args:
            path: Target file.
            lines: Lines without trailing newlines.
            append: Append instead of truncating.

        Returns:
            Number of lines written.
        """
        mode = "a" if append else "w"
        count = 0
        with translate_errors("write", path):
            self._prepare_parent(path)
            with open(
                path,
                mode,
                encoding=self.encoding,
                newline="",
                buffering=self.buffer_size,
            ) as f:
                for line in lines:
                    f.write(line)
                    f.write(self.newline)
                    count += 1
        logger.debug("Wrote %d lines to %s (mode=%s)", count, path, mode)
        return count

    def read_text(self, path: Path) -> str:
        """Read text content from a file exactly as stored."""
        with translate_errors("read", path):
            with open(
                path, encoding=self.encoding, newline="", buffering=self.buffer_size
            ) as f:
                content = f.read()
        logger.debug("Read %d characters from %s", len(content), path)
        return content

    def read_lines(self, path: Path) -> Iterator[str]:
        """Yield the lines of a file one at a time, without line terminators.

        LF, CRLF and lone CR all end a line.

        The file is opened lazily on first iteration and closed when the
        iterator is exhausted or closed.
        """
        with translate_errors("read", path):
            with open(
                path, encoding=self.encoding, newline="", buffering=self.buffer_size
            ) as f:
                logger.debug("Reading lines from %s", path)
                for line in f:
                    yield _strip_terminator(line)

    def delete(self, path: Path) -> bool:
        """Delete a file.

        Returns:
            True if a file was removed, False if the path did not exist.

        Raises:
            FileOpsError: If the path is a directory.
        """
        with translate_errors("delete", path):
            if path.is_dir() and not path.is_symlink():
                raise FileOpsError(f"Cannot delete '{path}': is a directory", path)
            try:
                path.unlink()
            except FileNotFoundError:
                logger.debug("Nothing to delete at %s", path)
                return False
        logger.debug("Deleted file: %s", path)
        return True

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        with translate_errors("create directory", path):
            path.mkdir(parents=parents, exist_ok=exist_ok)

    def info(self, path: Path) -> FileInfo:
        """Inspect the attributes of a path.

        A missing path is reported with ``exists=False`` rather than an error.
        """
        hidden = path.name.startswith(".")
        with translate_errors("inspect", path):
            try:
                stat = path.stat()
            except (FileNotFoundError, NotADirectoryError):
                return FileInfo(path=path, exists=False, hidden=hidden)

        is_dir = path.is_dir()
        return FileInfo(
            path=path,
            exists=True,
            is_file=path.is_file(),
            is_dir=is_dir,
            size=stat.st_size,
            modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            readable=os.access(path, os.R_OK),
            writable=os.access(path, os.W_OK),
            executable=os.access(path, os.X_OK),
            hidden=hidden,
        )
