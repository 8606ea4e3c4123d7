"""Create, read, write and delete text files with explicit encoding and scoped handles."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from fileops.protocols import (
    FileSystem,
    SettingsStore,
)

__all__ = [
    "__version__",
    "FileSystem",
    "SettingsStore",
]
