"""
Merge component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Shape of a tree value as seen by the merge."""

    RECORD = "record"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


@dataclass(frozen=True)
class CreateMappingInput:
    """Input for building a complete mapping from a base and overrides."""

    base: dict[str, Any]
    strict: dict[str, Any] | None = None
    components: dict[str, Any] | None = None
