from functools import lru_cache

from kitsune_styles.components.mapping import ProcessorCache, shared_cache
from kitsune_styles.components.theme_store import ThemeStore


# --- Processing ---
@lru_cache
def get_theme_store() -> ThemeStore:
    return ThemeStore()


def get_processor_cache() -> ProcessorCache:
    return shared_cache
