"""Tests for shared data types."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from fileops.types import ExampleReport, FileInfo, OperationResult


class TestOperationResult:
    """Tests for OperationResult invariants."""

    def test_success(self) -> None:
        """Test a successful result."""
        result = OperationResult(success=True, operation="write", path=Path("a.txt"))
        assert result.changed is True
        assert result.error is None

    def test_success_with_error_rejected(self) -> None:
        """Test success=True cannot carry an error."""
        with pytest.raises(ValueError, match="error is set"):
            OperationResult(success=True, operation="write", path=Path("a"), error="boom")

    def test_failure_requires_error(self) -> None:
        """Test success=False needs an error message."""
        with pytest.raises(ValueError, match="requires error"):
            OperationResult(success=False, operation="write", path=Path("a"))

    def test_operation_required(self) -> None:
        """Test operation cannot be empty."""
        with pytest.raises(ValueError, match="operation"):
            OperationResult(success=True, operation="", path=Path("a"))


class TestFileInfo:
    """Tests for FileInfo invariants."""

    def test_existing_file(self) -> None:
        """Test a fully populated file snapshot."""
        info = FileInfo(
            path=Path("a.txt"),
            exists=True,
            is_file=True,
            size=10,
            modified=datetime(2024, 1, 1, tzinfo=timezone.utc),
            readable=True,
            writable=True,
        )
        assert info.size == 10

    def test_missing_path(self) -> None:
        """Test a missing path may still be hidden."""
        info = FileInfo(path=Path(".env"), exists=False, hidden=True)
        assert info.hidden is True

    def test_file_and_dir_rejected(self) -> None:
        """Test a path cannot be both file and directory."""
        with pytest.raises(ValueError, match="both"):
            FileInfo(path=Path("x"), exists=True, is_file=True, is_dir=True)

    def test_missing_with_flags_rejected(self) -> None:
        """Test a missing path cannot report attributes."""
        with pytest.raises(ValueError, match="missing path"):
            FileInfo(path=Path("x"), exists=False, readable=True)

    def test_missing_with_size_rejected(self) -> None:
        """Test a missing path cannot have a size."""
        with pytest.raises(ValueError, match="size or modified"):
            FileInfo(path=Path("x"), exists=False, size=0)

    def test_negative_size_rejected(self) -> None:
        """Test size cannot be negative."""
        with pytest.raises(ValueError, match="negative"):
            FileInfo(path=Path("x"), exists=True, is_file=True, size=-1)


class TestExampleReport:
    """Tests for ExampleReport."""

    def test_round_trip_ok(self) -> None:
        """Test matching lines report a clean round trip."""
        report = ExampleReport(path=Path("e.txt"), lines_written=["a"], lines_read=["a"])
        assert report.round_trip_ok is True

    def test_round_trip_mismatch(self) -> None:
        """Test differing lines are detected."""
        report = ExampleReport(path=Path("e.txt"), lines_written=["a"], lines_read=[])
        assert report.round_trip_ok is False
