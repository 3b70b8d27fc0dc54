"""
Combination component - variant/state combination engine.
"""

from .component import (
    combine_states,
    combine_variants,
    needs_all_variant_cases,
    state_groups_from_meta,
    variant_groups_from_meta,
)
from .models import CombinationKey, StateGroup, VariantGroup, join_key

__all__ = [
    # Entry points
    "combine_variants",
    "combine_states",
    "needs_all_variant_cases",
    "variant_groups_from_meta",
    "state_groups_from_meta",
    # Models
    "CombinationKey",
    "VariantGroup",
    "StateGroup",
    "join_key",
]
