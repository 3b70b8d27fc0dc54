"""
Combination component - enumerate variant and state combinations.

Every function here is pure: structurally equal inputs give equal outputs,
which is what lets the mapping processor memoize them.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

from kitsune_styles.domain.mapping import ComponentMeta

from .models import CombinationKey, StateGroup, VariantGroup, join_key


def variant_groups_from_meta(meta: ComponentMeta) -> tuple[VariantGroup, ...]:
    """Read declared variant groups in declaration order."""
    groups: list[VariantGroup] = []
    for name, values in meta.variant_groups.items():
        default = next((value for value, spec in values.items() if spec.default), None)
        groups.append(VariantGroup(name=name, values=tuple(values), default=default))
    return tuple(groups)


def state_groups_from_meta(meta: ComponentMeta) -> tuple[StateGroup, ...]:
    """Read declared states ordered by priority, declaration order on ties."""
    states = [StateGroup(name=name, priority=spec.priority) for name, spec in meta.states.items()]
    return tuple(sorted(states, key=lambda state: state.priority))


def needs_all_variant_cases(groups: Sequence[VariantGroup]) -> bool:
    """True when any group has no default value, forcing the full cross-product."""
    return any(not group.has_default for group in groups)


def _cross_product(groups: Sequence[VariantGroup]) -> tuple[CombinationKey, ...]:
    return tuple(join_key(parts) for parts in product(*(group.values for group in groups)))


def _default_path(groups: Sequence[VariantGroup]) -> tuple[CombinationKey, ...]:
    defaults = [group.default or "" for group in groups]
    keys = [join_key(defaults)]

    for index, group in enumerate(groups):
        for value in group.values:
            if value == group.default:
                continue
            parts = list(defaults)
            parts[index] = value
            keys.append(join_key(parts))

    return tuple(keys)


def combine_variants(
    groups: Sequence[VariantGroup],
    needs_all_cases: bool,
) -> tuple[CombinationKey, ...]:
    """
    Enumerate the variant combinations a theme must provide styles for.

    With ``needs_all_cases`` every cross-product combination is produced in
    declared group order. Otherwise only the default path: the all-defaults
    combination, then each non-default value against every other group's
    default.
    """
    if not groups:
        return ()
    if needs_all_cases:
        return _cross_product(groups)
    return _default_path(groups)


def combine_states(states: Sequence[StateGroup]) -> tuple[CombinationKey, ...]:
    """
    Enumerate state combinations.

    Each state in turn is appended to every key accumulated so far and then
    added on its own, so ``(a, b, c)`` gives
    ``a, a.b, b, a.c, a.b.c, b.c, c``.
    """
    accumulated: list[CombinationKey] = []
    for state in states:
        combined = [join_key((key, state.name)) for key in accumulated]
        accumulated.extend(combined)
        accumulated.append(state.name)
    return tuple(accumulated)
