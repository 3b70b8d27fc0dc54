"""
Mapping component unit tests.

Tests for processing units and combination memoization.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from threading import Event, Thread
from typing import Any

import pytest

from kitsune_styles.components.combination import StateGroup, VariantGroup
from kitsune_styles.components.mapping import (
    CacheSection,
    MappingProcessor,
    ProcessorCache,
    clear_processor_cache,
    get_processor_cache_stats,
    run,
    state_cache_key,
    variant_cache_key,
)
from kitsune_styles.domain.errors import CacheConsistencyError, SchemaError

COMPONENTS: dict[str, Any] = {
    "Button": {
        "meta": {
            "appearances": {"filled": {"default": True}, "outline": {"default": False}},
            "variantGroups": {
                "status": {"primary": {"default": True}, "danger": {"default": False}},
                "size": {"medium": {"default": True}, "large": {"default": False}},
            },
            "states": {"hover": {"priority": 0}, "active": {"priority": 1}},
        },
        "appearances": {"filled": {"mapping": {}}, "outline": {"mapping": {}}},
    },
    "Toggle": {
        "meta": {
            "variantGroups": {"status": {"basic": {}, "primary": {}}},
            "states": {"checked": {"priority": 0}},
        },
        "appearances": {"default": {"mapping": {}}},
    },
}


@pytest.fixture(autouse=True)
def fresh_cache() -> None:
    """Start every test from an empty shared cache."""
    clear_processor_cache()


@pytest.fixture
def processor() -> MappingProcessor:
    return MappingProcessor()


# --- Processing ---


class TestProcess:
    def test_empty_mapping(self, processor: MappingProcessor) -> None:
        assert processor.process({}) == ()

    def test_component_without_variants(self, processor: MappingProcessor) -> None:
        result = processor.process(
            {
                "SimpleComponent": {
                    "meta": {
                        "scope": "all",
                        "parameters": {},
                        "appearances": {"default": {"default": True}},
                        "variantGroups": {},
                        "states": {},
                    },
                    "appearances": {"default": {"mapping": {}}},
                }
            }
        )

        assert len(result) == 1
        assert result[0].name == "SimpleComponent"
        assert result[0].variants == ()
        assert result[0].states == ()

    def test_appearances_in_declared_order(self, processor: MappingProcessor) -> None:
        result = processor.process(
            {
                "StyledComponent": {
                    "meta": {},
                    "appearances": {
                        "default": {"mapping": {}},
                        "outline": {"mapping": {}},
                        "ghost": {"mapping": {}},
                    },
                }
            }
        )

        assert [unit.appearance for unit in result] == ["default", "outline", "ghost"]

    def test_components_in_declared_order(self, processor: MappingProcessor) -> None:
        result = processor.process(COMPONENTS)

        assert [(unit.name, unit.appearance) for unit in result] == [
            ("Button", "filled"),
            ("Button", "outline"),
            ("Toggle", "default"),
        ]

    def test_combinations_shared_across_appearances(self, processor: MappingProcessor) -> None:
        filled, outline, _ = processor.process(COMPONENTS)

        assert filled.variants == ("primary.medium", "danger.medium", "primary.large")
        assert filled.states == ("hover", "hover.active", "active")
        assert outline.variants is filled.variants
        assert outline.states is filled.states

    def test_group_without_default_uses_all_cases(self, processor: MappingProcessor) -> None:
        *_, toggle = processor.process(COMPONENTS)
        assert toggle.variants == ("basic", "primary")
        assert toggle.states == ("checked",)

    def test_missing_appearances_is_schema_error(self, processor: MappingProcessor) -> None:
        with pytest.raises(SchemaError) as exc_info:
            processor.process({"Broken": {"meta": {}}})

        assert exc_info.value.path == ("Broken",)
        assert "Broken" in str(exc_info.value)

    def test_input_not_mutated(self, processor: MappingProcessor) -> None:
        before = copy.deepcopy(COMPONENTS)
        processor.process(COMPONENTS)
        assert before == COMPONENTS

    def test_consistent_results_with_caching(self, processor: MappingProcessor) -> None:
        assert processor.process(COMPONENTS) == processor.process(COMPONENTS)

    def test_run_entry_point(self) -> None:
        assert len(run(COMPONENTS)) == 3


# --- Memoization ---


class TestMemoization:
    """Test shared cache population and clearing."""

    def test_starts_empty(self) -> None:
        stats = get_processor_cache_stats()
        assert (stats.variants, stats.states, stats.components) == (0, 0, 0)

    def test_populates_caches(self, processor: MappingProcessor) -> None:
        processor.process(COMPONENTS)

        stats = get_processor_cache_stats()
        assert stats.variants == 2
        assert stats.states == 2
        assert stats.components == 2

    def test_clear_resets_all_counts(self, processor: MappingProcessor) -> None:
        processor.process(COMPONENTS)

        clear_processor_cache()

        assert get_processor_cache_stats().to_dict() == {
            "variants": 0,
            "states": 0,
            "components": 0,
        }

    def test_reuses_cache_across_processors(self) -> None:
        MappingProcessor().process(COMPONENTS)
        after_first = get_processor_cache_stats()

        MappingProcessor().process(copy.deepcopy(COMPONENTS))
        after_second = get_processor_cache_stats()

        assert after_second.variants == after_first.variants
        assert after_second.states == after_first.states

    def test_structural_hit_returns_cached_tuple(self, processor: MappingProcessor) -> None:
        first = processor.process(COMPONENTS)
        second = processor.process(copy.deepcopy(COMPONENTS))

        assert second[0].variants is first[0].variants

    def test_component_cache_reset_per_call(self, processor: MappingProcessor) -> None:
        processor.process(COMPONENTS)
        changed = {
            "Button": {
                "meta": {"variantGroups": {"status": {"info": {"default": True}}}},
                "appearances": {"ghost": {"mapping": {}}},
            }
        }

        result = processor.process(changed)

        assert [(unit.appearance, unit.variants) for unit in result] == [("ghost", ("info",))]
        assert get_processor_cache_stats().components == 1

    def test_injected_cache_is_isolated(self) -> None:
        own_cache = ProcessorCache()

        MappingProcessor(cache=own_cache).process(COMPONENTS)

        assert own_cache.stats().variants == 2
        assert get_processor_cache_stats().variants == 0


# --- Concurrency ---


class GatedComponents(dict[str, Any]):
    """Components that pause iteration after the first one until resumed."""

    def __init__(self, data: dict[str, Any], paused: Event, resume: Event) -> None:
        super().__init__(data)
        self.paused = paused
        self.resume = resume

    def items(self) -> Iterator[tuple[str, Any]]:  # type: ignore[override]
        for index, name in enumerate(list(self.keys())):
            if index == 1:
                self.paused.set()
                self.resume.wait(timeout=5)
            yield name, self[name]


class TestConcurrentProcess:
    """Test that concurrent calls on the shared cache keep their own units."""

    def test_interleaved_calls_do_not_share_component_units(self) -> None:
        paused, resume = Event(), Event()
        slow_document = GatedComponents(
            {
                "Pad": {"appearances": {"default": {"mapping": {}}}},
                "Button": {"appearances": {"ghost": {"mapping": {}}}},
            },
            paused,
            resume,
        )
        results: dict[str, Any] = {}

        def process_slow() -> None:
            units = MappingProcessor().process(slow_document)
            results["slow"] = [(unit.name, unit.appearance) for unit in units]

        thread = Thread(target=process_slow)
        thread.start()
        assert paused.wait(timeout=5)

        fast = MappingProcessor().process(
            {"Button": {"appearances": {"filled": {"mapping": {}}}}}
        )
        resume.set()
        thread.join(timeout=5)

        assert [(unit.name, unit.appearance) for unit in fast] == [("Button", "filled")]
        assert results["slow"] == [("Pad", "default"), ("Button", "ghost")]

    def test_standalone_component_lookup_needs_no_memo(
        self, processor: MappingProcessor
    ) -> None:
        units = processor.get_component_mapping_meta("Toggle", COMPONENTS["Toggle"])

        assert [unit.appearance for unit in units] == ["default"]
        assert get_processor_cache_stats().components == 0


class TestCacheKeys:
    def test_variant_key_includes_mode(self) -> None:
        groups = [VariantGroup("status", ("primary",), "primary")]
        assert variant_cache_key(groups, True) != variant_cache_key(groups, False)

    def test_variant_key_includes_default(self) -> None:
        first = [VariantGroup("size", ("small", "large"), "small")]
        second = [VariantGroup("size", ("small", "large"), "large")]
        assert variant_cache_key(first, False) != variant_cache_key(second, False)

    def test_variant_key_does_not_collide_on_separators(self) -> None:
        first = [VariantGroup("g", ("a,b",)), VariantGroup("h", ("c",))]
        second = [VariantGroup("g", ("a",)), VariantGroup("h", ("b", "c"))]
        assert variant_cache_key(first, True) != variant_cache_key(second, True)

    def test_state_key_is_ordered(self) -> None:
        ab = [StateGroup("a"), StateGroup("b")]
        ba = [StateGroup("b"), StateGroup("a")]
        assert state_cache_key(ab) != state_cache_key(ba)


class TestProcessorCache:
    """Test the cache service directly."""

    def test_get_set_and_stats(self) -> None:
        cache = ProcessorCache()
        cache.set(CacheSection.STATES, "k", ("a",))

        assert cache.get(CacheSection.STATES, "k") == ("a",)
        assert cache.get(CacheSection.VARIANTS, "k") is None
        assert cache.stats().states == 1

    def test_clear_single_section(self) -> None:
        cache = ProcessorCache()
        cache.set(CacheSection.STATES, "k", ("a",))
        cache.set(CacheSection.VARIANTS, "k", ("b",))

        cache.clear(CacheSection.STATES)

        assert cache.stats().to_dict() == {"variants": 1, "states": 0, "components": 0}

    def test_entry_under_wrong_key_raises(self) -> None:
        cache = ProcessorCache()
        cache.set(CacheSection.VARIANTS, "right", ("a",))
        # Simulate a table corrupted by a keying bug.
        cache._tables[CacheSection.VARIANTS]["wrong"] = cache._tables[CacheSection.VARIANTS][
            "right"
        ]

        with pytest.raises(CacheConsistencyError) as exc_info:
            cache.get(CacheSection.VARIANTS, "wrong")

        assert exc_info.value.expected_key == "wrong"
        assert exc_info.value.actual_key == "right"

    def test_replace_swaps_whole_section(self) -> None:
        cache = ProcessorCache()
        cache.set(CacheSection.COMPONENTS, "Old", ("x",))

        cache.replace(CacheSection.COMPONENTS, {"New": ("y",)})

        assert cache.get(CacheSection.COMPONENTS, "Old") is None
        assert cache.get(CacheSection.COMPONENTS, "New") == ("y",)
        assert cache.stats().components == 1
