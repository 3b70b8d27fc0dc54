"""
Mapping component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kitsune_styles.components.combination import CombinationKey


class CacheSection(Enum):
    """The three memo tables owned by the processor cache."""

    VARIANTS = "variants"
    STATES = "states"
    COMPONENTS = "components"


@dataclass(frozen=True)
class CacheStats:
    """Entry counts per cache section."""

    variants: int
    states: int
    components: int

    def to_dict(self) -> dict[str, int]:
        return {
            "variants": self.variants,
            "states": self.states,
            "components": self.components,
        }


@dataclass(frozen=True)
class ResolvedComponentAppearance:
    """One processing unit: a component appearance with its combinations."""

    name: str
    appearance: str
    variants: tuple[CombinationKey, ...]
    states: tuple[CombinationKey, ...]
