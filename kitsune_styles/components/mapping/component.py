"""
Mapping component - expand components into processing units.

For every component and appearance of a mapping document, attach the
variant and state combinations the schema processor has to produce styles
for. Combinations depend only on a component's meta, so they are computed
once per component and shared by all of its appearances.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from kitsune_styles.components.combination import (
    CombinationKey,
    StateGroup,
    VariantGroup,
    combine_states,
    combine_variants,
    needs_all_variant_cases,
    state_groups_from_meta,
    variant_groups_from_meta,
)
from kitsune_styles.domain.mapping import ComponentMapping, parse_component

from .cache import ProcessorCache, shared_cache
from .models import CacheSection, CacheStats, ResolvedComponentAppearance

logger = logging.getLogger(__name__)


def variant_cache_key(groups: Sequence[VariantGroup], needs_all_cases: bool) -> str:
    structure = [[list(group.values), group.default] for group in groups]
    mode = "all" if needs_all_cases else "default"
    return f"{json.dumps(structure, separators=(',', ':'))}:{mode}"


def state_cache_key(states: Sequence[StateGroup]) -> str:
    return json.dumps([state.name for state in states], separators=(",", ":"))


class MappingProcessor:
    """
    Turns the components of a mapping document into processing units.

    Variant and state combinations are memoized in the cache service and
    survive across calls and processor instances, since they are keyed by
    structure. The per-component memo is keyed by name only, so it lives in
    a table local to each ``process`` call; the cache service only records
    the last call's table for stats.
    """

    def __init__(self, cache: ProcessorCache | None = None) -> None:
        self._cache = cache if cache is not None else shared_cache

    @property
    def cache(self) -> ProcessorCache:
        return self._cache

    def process(
        self,
        components: Mapping[str, ComponentMapping | Mapping[str, Any]],
    ) -> tuple[ResolvedComponentAppearance, ...]:
        # Owned by this call only, so concurrent calls never share units.
        memo: dict[str, tuple[ResolvedComponentAppearance, ...]] = {}

        result: list[ResolvedComponentAppearance] = []
        for name, block in components.items():
            result.extend(self.get_component_mapping_meta(name, block, memo))

        self._cache.replace(CacheSection.COMPONENTS, memo)
        return tuple(result)

    def get_component_mapping_meta(
        self,
        name: str,
        block: ComponentMapping | Mapping[str, Any],
        memo: dict[str, tuple[ResolvedComponentAppearance, ...]] | None = None,
    ) -> tuple[ResolvedComponentAppearance, ...]:
        """
        Processing units of one component, one per appearance.

        ``memo`` is the per-call table owned by ``process``; without one the
        units are always computed afresh.
        """
        if memo is not None and name in memo:
            return memo[name]

        component = parse_component(name, block)
        variants = self.get_component_variants(component)
        states = self.get_component_states(component)

        result = tuple(
            ResolvedComponentAppearance(
                name=name,
                appearance=appearance,
                variants=variants,
                states=states,
            )
            for appearance in component.appearances
        )

        if memo is not None:
            memo[name] = result
        return result

    def get_component_variants(self, component: ComponentMapping) -> tuple[CombinationKey, ...]:
        groups = variant_groups_from_meta(component.meta)
        if not groups:
            return ()

        needs_all_cases = needs_all_variant_cases(groups)
        key = variant_cache_key(groups, needs_all_cases)

        cached = self._cache.get(CacheSection.VARIANTS, key)
        if cached is not None:
            logger.debug("Variant combinations cache hit: %s", key)
            return tuple(cached)

        result = combine_variants(groups, needs_all_cases)
        self._cache.set(CacheSection.VARIANTS, key, result)
        return result

    def get_component_states(self, component: ComponentMapping) -> tuple[CombinationKey, ...]:
        states = state_groups_from_meta(component.meta)
        if not states:
            return ()

        key = state_cache_key(states)

        cached = self._cache.get(CacheSection.STATES, key)
        if cached is not None:
            logger.debug("State combinations cache hit: %s", key)
            return tuple(cached)

        result = combine_states(states)
        self._cache.set(CacheSection.STATES, key, result)
        return result


def clear_processor_cache() -> None:
    """Clear every section of the shared processor cache."""
    shared_cache.clear()


def get_processor_cache_stats() -> CacheStats:
    """Entry counts of the shared processor cache."""
    return shared_cache.stats()


def run(
    components: Mapping[str, ComponentMapping | Mapping[str, Any]],
    *,
    cache: ProcessorCache | None = None,
) -> tuple[ResolvedComponentAppearance, ...]:
    """Main entry point for the mapping component."""
    return MappingProcessor(cache=cache).process(components)
