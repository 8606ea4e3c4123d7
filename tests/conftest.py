"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fileops.config import ConfigManager
from fileops.filesystem import RealFileSystem


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory."""
    config_dir = tmp_path / ".fileops"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def config_manager(temp_config_dir: Path) -> ConfigManager:
    """Create a config manager backed by a temporary directory."""
    return ConfigManager.create(temp_config_dir)


@pytest.fixture
def fs() -> RealFileSystem:
    """Create a filesystem with default settings."""
    return RealFileSystem()


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    mock_fs = MagicMock()
    mock_fs.exists.return_value = False
    mock_fs.is_dir.return_value = False
    mock_fs.read_text.return_value = ""
    mock_fs.read_lines.return_value = iter([])
    return mock_fs


# ============================================================================
# Sample Content Fixtures
# ============================================================================


@pytest.fixture
def sample_lines() -> list[str]:
    """Lines with non-ASCII characters."""
    return ["Olá, mundo!", "Manipulação de arquivos.", "", "fim"]


@pytest.fixture
def sample_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Create a UTF-8 file containing sample_lines."""
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
