"""
File system adapter for mapping documents and the styles cache.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


class LocalFileSystemAdapter:
    """Adapter for local file system operations."""

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        return path.exists()

    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text."""
        return path.read_text(encoding="utf-8")

    def read_document(self, path: Path) -> dict[str, Any]:
        """
        Read a mapping document.

        YAML is a superset of JSON, so both formats go through safe_load.
        Raises ValueError for unparsable files or non-object documents.
        """
        try:
            data = yaml.safe_load(self.read_text(path))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid document syntax in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Document {path} must contain an object at the top level")
        return data

    def write_text(self, path: Path, content: str) -> None:
        """Write text, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


# Default adapter instance
default_filesystem = LocalFileSystemAdapter()
