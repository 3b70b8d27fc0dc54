"""Bootstrap component port definitions.

Protocol interfaces for external dependencies.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class FileSystemPort(Protocol):
    """Port for file system operations."""

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a file as text."""
        ...

    def read_document(self, path: Path) -> dict[str, Any]:
        """Read and parse a JSON or YAML document."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write text, creating parent directories as needed."""
        ...
