"""
Mapping component - per component/appearance processing units with
memoized variant and state combinations.
"""

from .cache import ProcessorCache, shared_cache
from .component import (
    MappingProcessor,
    clear_processor_cache,
    get_processor_cache_stats,
    run,
    state_cache_key,
    variant_cache_key,
)
from .models import CacheSection, CacheStats, ResolvedComponentAppearance

__all__ = [
    # Entry points
    "run",
    "MappingProcessor",
    "clear_processor_cache",
    "get_processor_cache_stats",
    "variant_cache_key",
    "state_cache_key",
    # Cache service
    "ProcessorCache",
    "shared_cache",
    # Models
    "CacheSection",
    "CacheStats",
    "ResolvedComponentAppearance",
]
