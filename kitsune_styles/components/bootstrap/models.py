"""Bootstrap component data models.

Frozen dataclasses for inputs, outputs, and errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BootstrapInput:
    """Where to read mappings from and where to keep the generated styles."""

    mapping_path: Path
    cache_path: Path
    custom_mapping_path: Path | None = None


@dataclass(frozen=True)
class BootstrapError:
    """Error details."""

    code: str
    message: str
    path: str | None = None


@dataclass(frozen=True)
class BootstrapOutput:
    """Result of a bootstrap run."""

    written: bool
    checksum: str | None
    cache_path: Path | None
    entries: int
    errors: tuple[BootstrapError, ...]
    success: bool

    @classmethod
    def up_to_date(cls, checksum: str, cache_path: Path, entries: int) -> BootstrapOutput:
        """Cache already matches the custom mapping."""
        return cls(
            written=False,
            checksum=checksum,
            cache_path=cache_path,
            entries=entries,
            errors=(),
            success=True,
        )

    @classmethod
    def generated(cls, checksum: str, cache_path: Path, entries: int) -> BootstrapOutput:
        """Styles were processed and the cache rewritten."""
        return cls(
            written=True,
            checksum=checksum,
            cache_path=cache_path,
            entries=entries,
            errors=(),
            success=True,
        )

    @classmethod
    def failed(cls, *errors: BootstrapError) -> BootstrapOutput:
        """Create a failure result."""
        return cls(
            written=False,
            checksum=None,
            cache_path=None,
            entries=0,
            errors=errors,
            success=False,
        )
