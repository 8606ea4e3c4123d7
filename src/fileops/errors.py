"""Error taxonomy for file operations."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

__all__ = [
    "FileAccessError",
    "FileEncodingError",
    "FileMissingError",
    "FileOpsError",
    "translate_errors",
]


class FileOpsError(Exception):
    """Error during a file operation."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class FileMissingError(FileOpsError, FileNotFoundError):
    """The path does not exist."""

    pass


class FileAccessError(FileOpsError, PermissionError):
    """The process lacks permission for the path."""

    pass


class FileEncodingError(FileOpsError, UnicodeError):
    """Content could not be encoded or decoded with the configured encoding."""

    pass


@contextmanager
def translate_errors(operation: str, path: Path) -> Iterator[None]:
    """Convert OS and codec errors raised in the block into FileOpsError.

    Args:
        operation: Short verb describing the operation (used in messages).
        path: Path the operation targets.

    Raises:
        FileMissingError: If the path (or its parent) does not exist.
        FileAccessError: If permission was denied.
        FileEncodingError: If the content does not match the encoding.
        FileOpsError: For any other I/O failure.
    """
    try:
        yield
    except FileOpsError:
        raise
    except FileNotFoundError as e:
        raise FileMissingError(f"Cannot {operation} '{path}': not found", path) from e
    except PermissionError as e:
        raise FileAccessError(f"Cannot {operation} '{path}': permission denied", path) from e
    except UnicodeError as e:
        raise FileEncodingError(f"Cannot {operation} '{path}': {e}", path) from e
    except OSError as e:
        raise FileOpsError(f"Cannot {operation} '{path}': {e.strerror or e}", path) from e
