"""Shared data types for fileops."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

__all__ = ["ExampleReport", "FileInfo", "OperationResult"]


@dataclass
class OperationResult:
    """Result of a single file operation.

    Attributes:
        success: True if the operation succeeded.
        operation: Operation name (create, write, read, delete).
        path: Target path.
        changed: False when the operation was a no-op (file already existed,
            nothing to delete).
        detail: Human-readable outcome (None if nothing to add).
        error: Error message (None on success).
    """

    success: bool
    operation: str
    path: Path
    changed: bool = True
    detail: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and self.error is None:
            raise ValueError("success=False requires error message")
        if not self.operation:
            raise ValueError("operation cannot be empty")


@dataclass
class FileInfo:
    """Attributes of a path at the time it was inspected.

    A missing path reports ``exists=False`` with every flag false and no
    size or modification time.
    """

    path: Path
    exists: bool
    is_file: bool = False
    is_dir: bool = False
    size: int | None = None
    modified: datetime | None = None
    readable: bool = False
    writable: bool = False
    executable: bool = False
    hidden: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.is_file and self.is_dir:
            raise ValueError("path cannot be both a file and a directory")
        if not self.exists:
            if self.is_file or self.is_dir or self.readable or self.writable or self.executable:
                raise ValueError("missing path cannot report attributes")
            if self.size is not None or self.modified is not None:
                raise ValueError("missing path cannot have size or modified time")
        if self.size is not None and self.size < 0:
            raise ValueError("size cannot be negative")


@dataclass
class ExampleReport:
    """Outcome of the write, read, delete walkthrough."""

    path: Path
    lines_written: list[str] = field(default_factory=list)
    lines_read: list[str] = field(default_factory=list)
    deleted: bool = False

    @property
    def round_trip_ok(self) -> bool:
        """True when what was read back equals what was written."""
        return self.lines_read == self.lines_written
