"""
Processor cache service.

Holds the variant and state combination tables, plus the units of the last
processed document, behind a single lock. Keys are full structural
serialisations, never truncated hashes, and every entry remembers the key it
was stored under.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from threading import Lock
from typing import Any

from kitsune_styles.domain.errors import CacheConsistencyError

from .models import CacheSection, CacheStats


@dataclass(frozen=True)
class _Entry:
    key: str
    value: Any


class ProcessorCache:
    def __init__(self) -> None:
        self._tables: dict[CacheSection, dict[str, _Entry]] = {
            section: {} for section in CacheSection
        }
        self._lock = Lock()

    def get(self, section: CacheSection, key: str) -> Any | None:
        """
        Look up a cached value.

        Returns None on a miss. Raises CacheConsistencyError if the stored
        entry belongs to another key.
        """
        with self._lock:
            entry = self._tables[section].get(key)

        if entry is None:
            return None
        if entry.key != key:
            raise CacheConsistencyError(key, entry.key)
        return entry.value

    def set(self, section: CacheSection, key: str, value: Any) -> None:
        with self._lock:
            self._tables[section][key] = _Entry(key=key, value=value)

    def replace(self, section: CacheSection, entries: Mapping[str, Any]) -> None:
        """Swap a whole section for ``entries`` in one step."""
        table = {key: _Entry(key=key, value=value) for key, value in entries.items()}
        with self._lock:
            self._tables[section] = table

    def clear(self, section: CacheSection | None = None) -> None:
        """Clear one section, or every section when none is given."""
        with self._lock:
            sections = [section] if section is not None else list(CacheSection)
            for name in sections:
                self._tables[name].clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                variants=len(self._tables[CacheSection.VARIANTS]),
                states=len(self._tables[CacheSection.STATES]),
                components=len(self._tables[CacheSection.COMPONENTS]),
            )


# Shared by every processor that is not given its own cache.
shared_cache = ProcessorCache()
