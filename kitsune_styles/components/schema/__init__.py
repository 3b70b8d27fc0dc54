"""
Schema component - mapping document to theme style dictionary.
"""

from ._impl import compose_style, style_key, token_table, validate_component
from .component import SchemaProcessor, run
from .models import StyleRequest, ThemedStyleType, ThemeStyleType

__all__ = [
    # Entry points
    "run",
    "SchemaProcessor",
    # Helpers
    "compose_style",
    "style_key",
    "token_table",
    "validate_component",
    # Models
    "StyleRequest",
    "ThemeStyleType",
    "ThemedStyleType",
]
