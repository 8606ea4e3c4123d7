"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fileops.protocols import FileSystem, SettingsStore


def _default_config() -> SettingsStore:
    """Create the default settings store."""
    from fileops.config import ConfigManager
    return ConfigManager.create_default()

@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    Dependencies are typed using Protocol interfaces, so test doubles can be
    injected without inheritance.
    """

    filesystem: FileSystem
    config: SettingsStore = field(default_factory=_default_config)


def create_context(config_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Loads persisted settings and builds a filesystem configured from them.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_dir: Override config directory (for testing).

    Returns:
        Configured AppContext with all dependencies.

    Raises:
        ValueError: If the stored configuration is invalid.
    """
    from fileops.config import ConfigManager
    from fileops.filesystem import RealFileSystem

    config = ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    filesystem = RealFileSystem.from_settings(config.load())

    return AppContext(filesystem=filesystem, config=config)
