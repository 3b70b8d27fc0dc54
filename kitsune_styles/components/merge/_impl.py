"""
Deep merge over JSON-compatible trees.

Records merge key by key; sequences and scalars are replaced wholesale.
Neither input is mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import ValueKind


def classify(value: Any) -> ValueKind:
    """Tag a value as record, sequence or scalar."""
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def deep_merge(base: Any, override: Any) -> Any:
    """
    Merge ``override`` into ``base``, override taking precedence.

    Returns ``base`` itself when there is nothing to merge. Otherwise the
    result is a fresh dict; untouched nested values are shared with the
    inputs, never modified.
    """
    if override is None:
        return base
    if base is None:
        return override

    if (classify(base), classify(override)) != (ValueKind.RECORD, ValueKind.RECORD):
        return override

    result = dict(base)
    for key, value in override.items():
        nested = key in result and classify(result[key]) is ValueKind.RECORD
        if nested and classify(value) is ValueKind.RECORD:
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
