"""
Schema component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Resolved property dictionary of one style entry.
ThemedStyleType = dict[str, Any]

# Flat output: style key -> resolved properties.
ThemeStyleType = dict[str, ThemedStyleType]


@dataclass(frozen=True)
class StyleRequest:
    """One entry to compose: an appearance under a variant/state combination."""

    component: str
    appearance: str
    variants: tuple[str, ...] = ()
    states: tuple[str, ...] = ()
