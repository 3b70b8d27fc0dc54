"""
Style composition for the schema processor.

Layers are merged in precedence order, later layers winning:
base mapping < variant overrides < state overrides < variant+state overrides.
A non-default appearance is composed on top of the default appearance.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from kitsune_styles.components.combination import join_key
from kitsune_styles.components.merge import deep_merge
from kitsune_styles.domain.errors import SchemaError
from kitsune_styles.domain.mapping import (
    SEPARATOR_MAPPING_ENTRY,
    STATE_KEY,
    AppearanceMapping,
    ComponentMapping,
    ComponentMeta,
)

from .models import StyleRequest


def split_key(key: str | None) -> tuple[str, ...]:
    if not key:
        return ()
    return tuple(key.split(SEPARATOR_MAPPING_ENTRY))


def style_key(request: StyleRequest) -> str:
    """Build ``component.appearance[.variants][.states]``."""
    return join_key((request.component, request.appearance, *request.variants, *request.states))


def _stateless(block: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in block.items() if key != STATE_KEY}


def _state_block(block: dict[str, Any], state: str) -> dict[str, Any]:
    states = block.get(STATE_KEY) or {}
    state_block: dict[str, Any] = states.get(state) or {}
    return state_block


def appearance_layers(
    mapping: AppearanceMapping,
    variants: Iterable[tuple[str, str]],
    states: tuple[str, ...],
) -> list[dict[str, Any]]:
    """Collect override layers of one appearance, lowest precedence first."""
    variant_blocks = [
        mapping.variant_groups.get(group, {}).get(value) or {} for group, value in variants
    ]

    layers = [_stateless(mapping.mapping)]
    layers.extend(_stateless(block) for block in variant_blocks)

    for state in states:
        layers.append(_stateless(mapping.states.get(state) or {}))
        layers.append(_state_block(mapping.mapping, state))

    for block in variant_blocks:
        for state in states:
            layers.append(_state_block(block, state))

    return layers


def compose_style(component: ComponentMapping, request: StyleRequest) -> dict[str, Any]:
    """Merge every layer that applies to the requested entry."""
    groups = list(component.meta.variant_groups)
    variants = list(zip(groups, request.variants, strict=True))

    appearances = [request.appearance]
    default = component.meta.default_appearance()
    if default and default != request.appearance and default in component.appearances:
        appearances.insert(0, default)

    style: dict[str, Any] = {}
    for name in appearances:
        for layer in appearance_layers(component.appearances[name], variants, request.states):
            style = deep_merge(style, layer)
    return style


def token_table(strict: dict[str, Any], meta: ComponentMeta) -> dict[str, Any]:
    """Strict tokens with the component's parameter defaults layered on top."""
    table: dict[str, Any] = deep_merge(strict, meta.parameter_defaults())
    return table


def fill_parameter_defaults(style: dict[str, Any], meta: ComponentMeta) -> dict[str, Any]:
    missing = {
        name: value for name, value in meta.parameter_defaults().items() if name not in style
    }
    return {**style, **missing} if missing else style


# --- Validation ---


def _check_name(name: str, path: tuple[str, ...]) -> None:
    if not name or SEPARATOR_MAPPING_ENTRY in name:
        raise SchemaError(
            f"name '{name}' must be non-empty and must not contain '{SEPARATOR_MAPPING_ENTRY}'",
            path,
        )


def _check_states(block: dict[str, Any], declared: dict[str, Any], path: tuple[str, ...]) -> None:
    states = block.get(STATE_KEY)
    if states is None:
        return
    if not isinstance(states, dict):
        raise SchemaError("state block must be an object", (*path, STATE_KEY))
    for state in states:
        if state not in declared:
            raise SchemaError(f"undeclared state '{state}'", (*path, STATE_KEY, state))


def validate_component(name: str, component: ComponentMapping) -> None:
    """
    Check that every name used by the appearances is declared in meta.

    Raises SchemaError pointing at the first offending entry.
    """
    meta = component.meta
    _check_name(name, (name,))

    for group, values in meta.variant_groups.items():
        _check_name(group, (name, "meta", "variantGroups", group))
        if not values:
            raise SchemaError(
                f"variant group '{group}' declares no values", (name, "meta", "variantGroups", group)
            )
        for value in values:
            _check_name(value, (name, "meta", "variantGroups", group, value))
    for state in meta.states:
        _check_name(state, (name, "meta", "states", state))

    for appearance, mapping in component.appearances.items():
        path = (name, "appearances", appearance)
        _check_name(appearance, path)
        _check_states(mapping.mapping, meta.states, (*path, "mapping"))

        for state in mapping.states:
            if state not in meta.states:
                raise SchemaError(f"undeclared state '{state}'", (*path, "states", state))

        for group, values in mapping.variant_groups.items():
            if group not in meta.variant_groups:
                raise SchemaError(
                    f"undeclared variant group '{group}'", (*path, "variantGroups", group)
                )
            for value, block in values.items():
                value_path = (*path, "variantGroups", group, value)
                if value not in meta.variant_groups[group]:
                    raise SchemaError(f"undeclared variant '{value}'", value_path)
                _check_states(block, meta.states, value_path)
