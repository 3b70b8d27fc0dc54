"""
Combination component - Data models.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from kitsune_styles.domain.mapping import SEPARATOR_MAPPING_ENTRY

CombinationKey = str


def join_key(parts: Iterable[str]) -> CombinationKey:
    """Join key tokens with the mapping separator."""
    return SEPARATOR_MAPPING_ENTRY.join(parts)


@dataclass(frozen=True)
class VariantGroup:
    """A named axis of mutually exclusive variant values."""

    name: str
    values: tuple[str, ...]
    default: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class StateGroup:
    """A named interaction state with its ordering priority."""

    name: str
    priority: int = 0
