"""
Theme store component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from kitsune_styles.components.schema import ThemeStyleType

Listener = Callable[[], None]


class StyleProcessorPort(Protocol):
    """Anything that turns a mapping document into a style dictionary."""

    def process(self, params: Mapping[str, Any]) -> ThemeStyleType:
        """Process a mapping document."""
        ...
