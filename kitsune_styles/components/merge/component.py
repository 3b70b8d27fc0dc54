"""
Merge component - combine a base mapping with design system overrides.
"""

from __future__ import annotations

from typing import Any

from ._impl import deep_merge
from .models import CreateMappingInput


def merge_mapping(base_mapping: dict[str, Any], overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Merge a full override document into a base mapping."""
    merged: dict[str, Any] = deep_merge(base_mapping, overrides)
    return merged


def create_mapping(
    base: dict[str, Any],
    strict: dict[str, Any] | None = None,
    components: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build a complete mapping from a base and section overrides.

    Only ``strict`` and ``components`` are merged; every other top-level key
    of ``base`` (``version`` and friends) is carried over as is.
    """
    result = dict(base)

    if strict:
        result["strict"] = deep_merge(base.get("strict") or {}, strict)

    if components:
        result["components"] = deep_merge(base.get("components") or {}, components)

    return result


def run(inp: CreateMappingInput) -> dict[str, Any]:
    """Main entry point for the merge component."""
    return create_mapping(inp.base, strict=inp.strict, components=inp.components)
