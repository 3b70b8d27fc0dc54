"""
Tokens component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# A value is a reference when it is a string starting with this prefix.
REFERENCE_PREFIX = "$"

TokenTable = Mapping[str, Any]


@dataclass(frozen=True)
class ResolvePropertiesInput:
    """Input for resolving a property dictionary against a token table."""

    table: TokenTable
    properties: dict[str, Any]
    path: tuple[str, ...] = field(default_factory=tuple)
