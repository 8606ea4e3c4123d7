"""Tests for the write, read, delete walkthrough."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fileops.errors import FileAccessError
from fileops.example import DEFAULT_EXAMPLE_LINES, run_example
from fileops.filesystem import RealFileSystem


class TestRunExample:
    """Tests for run_example."""

    def test_default_lines(self, fs: RealFileSystem, tmp_path: Path) -> None:
        """Test the default walkthrough echoes each line then confirms deletion."""
        path = tmp_path / "exemplo.txt"
        echoed: list[str] = []

        report = run_example(fs, path, echo=echoed.append)

        assert echoed == [*DEFAULT_EXAMPLE_LINES, f"Deleted file: {path}"]
        assert report.lines_read == list(DEFAULT_EXAMPLE_LINES)
        assert report.round_trip_ok is True
        assert report.deleted is True
        assert not path.exists()

    def test_custom_lines(self, fs: RealFileSystem, tmp_path: Path) -> None:
        """Test custom lines, including blanks, survive the round trip."""
        lines = ["first", "", "ção"]

        report = run_example(fs, tmp_path / "custom.txt", lines, echo=lambda _: None)

        assert report.lines_written == lines
        assert report.lines_read == lines

    def test_overwrites_existing_file(self, fs: RealFileSystem, tmp_path: Path) -> None:
        """Test previous content of the path is not read back."""
        path = tmp_path / "exemplo.txt"
        path.write_text("stale\ncontent\n", encoding="utf-8")

        report = run_example(fs, path, ["fresh"], echo=lambda _: None)

        assert report.lines_read == ["fresh"]

    def test_nothing_deleted_message(self, mock_filesystem: MagicMock) -> None:
        """Test the message when the file was already gone at delete time."""
        mock_filesystem.read_lines.return_value = iter(["a"])
        mock_filesystem.delete.return_value = False
        echoed: list[str] = []

        report = run_example(mock_filesystem, Path("x.txt"), ["a"], echo=echoed.append)

        assert report.deleted is False
        assert echoed == ["a", "Nothing to delete at x.txt"]

    def test_step_order(self, mock_filesystem: MagicMock) -> None:
        """Test write, read and delete all target the same path in order."""
        path = Path("same.txt")
        mock_filesystem.read_lines.return_value = iter(["a"])
        mock_filesystem.delete.return_value = True

        run_example(mock_filesystem, path, ["a"], echo=lambda _: None)

        names = [name for name, _, _ in mock_filesystem.method_calls]
        assert names == ["write_lines", "read_lines", "delete"]
        mock_filesystem.write_lines.assert_called_once_with(path, ["a"])
        mock_filesystem.read_lines.assert_called_once_with(path)
        mock_filesystem.delete.assert_called_once_with(path)

    def test_failure_propagates(self, mock_filesystem: MagicMock) -> None:
        """Test a failing step raises and later steps are skipped."""
        mock_filesystem.write_lines.side_effect = FileAccessError("denied", Path("x"))

        with pytest.raises(FileAccessError):
            run_example(mock_filesystem, Path("x"), ["a"], echo=lambda _: None)

        mock_filesystem.read_lines.assert_not_called()
        mock_filesystem.delete.assert_not_called()
