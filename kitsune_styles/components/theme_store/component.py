"""
Theme store component - hold the current processed theme.

Every new mapping document is processed, stamped with a content-addressed
``__themeId`` and published to subscribers.
"""

from __future__ import annotations

import copy
import hashlib
import json
import logging
from collections.abc import Callable, Mapping
from threading import Lock
from typing import Any

from kitsune_styles.components.schema import SchemaProcessor, ThemeStyleType
from kitsune_styles.domain.mapping import THEME_ID_KEY

from .ports import Listener, StyleProcessorPort

logger = logging.getLogger(__name__)

DEFAULT_THEME_ID = "default"


def compute_theme_id(styles: ThemeStyleType) -> str:
    """Stable identifier derived from the resolved styles."""
    canonical = json.dumps(styles, sort_keys=True, separators=(",", ":"), default=str)
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return f"theme_{digest[:16]}"


class ThemeStore:
    def __init__(self, processor: StyleProcessorPort | None = None) -> None:
        self._processor = processor or SchemaProcessor()
        self._listeners: list[Listener] = []
        self._snapshot: dict[str, Any] = {}
        self._lock = Lock()

    def get_snapshot(self) -> dict[str, Any]:
        """
        Current styles plus the ``__themeId`` stamp (empty before any set).

        Returns a deep copy; changing it never alters the published theme.
        Publish changes through ``set_mapping``.
        """
        with self._lock:
            snapshot = self._snapshot
        return copy.deepcopy(snapshot)

    def get_theme_id(self) -> str:
        theme_id: str = self._snapshot.get(THEME_ID_KEY, DEFAULT_THEME_ID)
        return theme_id

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def set_mapping(self, mapping: Mapping[str, Any]) -> str:
        """
        Process and publish a new mapping document.

        Processing errors propagate; the previous snapshot stays in place and
        no listener is called. Returns the new theme id.
        """
        styles = self._processor.process(mapping)
        theme_id = compute_theme_id(styles)

        with self._lock:
            self._snapshot = {**styles, THEME_ID_KEY: theme_id}
            listeners = list(self._listeners)

        logger.debug("Theme %s set with %d style entries", theme_id, len(styles))
        for listener in listeners:
            listener()
        return theme_id
