"""File operations that report outcomes instead of raising."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from fileops.errors import FileOpsError
from fileops.protocols import FileSystem
from fileops.types import OperationResult

logger = logging.getLogger(__name__)


class FileOperations:
    """Runs create, write and delete against a filesystem.

    Failures are logged and returned as unsuccessful OperationResults so
    callers can report them without handling the error taxonomy.
    """

    def __init__(self, fs: FileSystem) -> None:
        """Initialize with the filesystem to operate on.

        Args:
            fs: Filesystem implementation.
        """
        self.fs = fs

    def _failed(self, operation: str, path: Path, error: FileOpsError) -> OperationResult:
        logger.debug("%s failed for %s", operation, path, exc_info=True)
        return OperationResult(
            success=False,
            operation=operation,
            path=path,
            changed=False,
            error=str(error),
        )

    def create(self, path: Path, parents: bool = False) -> OperationResult:
        """Create an empty file.

        Args:
            path: File to create.
            parents: Create missing parent directories.

        Returns:
            Result with changed=False if the file already existed.
        """
        try:
            created = self.fs.create_file(path, parents=parents)
        except FileOpsError as e:
            return self._failed("create", path, e)

        return OperationResult(
            success=True,
            operation="create",
            path=path,
            changed=created,
            detail=f"Created {path}" if created else f"{path} already exists",
        )

    def write(
        self,
        path: Path,
        text: str | None = None,
        lines: Sequence[str] | None = None,
        append: bool = False,
    ) -> OperationResult:
        """Write raw text or a sequence of lines.

        Exactly one of text or lines must be given.

        Args:
            path: Target file.
            text: Text written as-is.
            lines: Lines written with a terminator after each.
            append: Append instead of truncating.

        Returns:
            Result describing what was written.

        Raises:
            ValueError: If both or neither of text and lines are given.
        """
        if (text is None) == (lines is None):
            raise ValueError("Provide either text or lines")

        verb = "Appended" if append else "Wrote"
        try:
            if text is not None:
                self.fs.write_text(path, text, append=append)
                detail = f"{verb} {len(text)} characters to {path}"
            else:
                count = self.fs.write_lines(path, lines, append=append)
                detail = f"{verb} {count} lines to {path}"
        except FileOpsError as e:
            return self._failed("write", path, e)

        return OperationResult(success=True, operation="write", path=path, detail=detail)

    def delete(self, path: Path) -> OperationResult:
        """Delete a file.

        Args:
            path: File to delete.

        Returns:
            Result with changed=False if there was nothing to delete.
        """
        try:
            deleted = self.fs.delete(path)
        except FileOpsError as e:
            return self._failed("delete", path, e)

        return OperationResult(
            success=True,
            operation="delete",
            path=path,
            changed=deleted,
            detail=f"Deleted file: {path}" if deleted else f"Nothing to delete at {path}",
        )
