"""
Theme store component - processed theme snapshot with subscriptions.
"""

from .component import DEFAULT_THEME_ID, ThemeStore, compute_theme_id
from .ports import Listener, StyleProcessorPort

__all__ = [
    "ThemeStore",
    "compute_theme_id",
    "DEFAULT_THEME_ID",
    # Ports
    "Listener",
    "StyleProcessorPort",
]
