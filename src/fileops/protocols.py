"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the services the
CLI and the example walkthrough depend on. Concrete implementations satisfy
these protocols structurally (duck typing), so tests can substitute doubles
without inheritance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fileops.types import FileInfo

if TYPE_CHECKING:
    from fileops.config import Settings


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for single-file text operations.

    Implementations release every handle they open before returning and
    raise FileOpsError subclasses on failure.
    """

    def create_file(self, path: Path, parents: bool = False) -> bool:
        """Create an empty file.

        Args:
            path: File to create.
            parents: Create missing parent directories first.

        Returns:
            True if created, False if the file already existed.
        """
        ...

    def write_text(self, path: Path, content: str, append: bool = False) -> None:
        """Write text content to a file.

        Args:
            path: Target file.
            content: Text to write.
            append: Append instead of truncating.
        """
        ...

    def write_lines(self, path: Path, lines: Iterable[str], append: bool = False) -> int:
        """Write lines to a file, one terminator after each.

        Args:
            path: Target file.
            lines: Lines without terminators.
            append: Append instead of truncating.

        Returns:
            Number of lines written.
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read the whole content of a file.

        Args:
            path: File to read.

        Returns:
            File content.
        """
        ...

    def read_lines(self, path: Path) -> Iterator[str]:
        """Iterate over the lines of a file.

        Args:
            path: File to read.

        Returns:
            Iterator of lines without terminators.
        """
        ...

    def delete(self, path: Path) -> bool:
        """Delete a file.

        Args:
            path: File to delete.

        Returns:
            True if removed, False if nothing existed.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if the path exists.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if the path is a directory.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            parents: Create missing parents.
            exist_ok: Do not fail if it exists.
        """
        ...

    def info(self, path: Path) -> FileInfo:
        """Inspect the attributes of a path.

        Args:
            path: Path to inspect.

        Returns:
            FileInfo snapshot (exists=False for a missing path).
        """
        ...


@runtime_checkable
class SettingsStore(Protocol):
    """Protocol for persisted settings."""

    config_file: Path

    def load(self) -> Settings:
        """Load settings.

        Returns:
            Current settings.
        """
        ...

    def save(self, settings: Settings) -> None:
        """Persist settings.

        Args:
            settings: Settings to store.
        """
        ...

    def set(self, key: str, value: str) -> Settings:
        """Update one setting by key.

        Args:
            key: Configuration key.
            value: Raw string value.

        Returns:
            Updated settings.
        """
        ...
