"""
Tokens component - resolve symbolic token references.

A reference is a string such as ``$color-primary``; it names another entry
of a flat token table. Chains are followed until a literal value is found.
Unknown names and cycles are authoring errors and always raise.
"""

from __future__ import annotations

from typing import Any

from kitsune_styles.domain.errors import CyclicReference, ResolutionError, UnknownToken

from .models import REFERENCE_PREFIX, ResolvePropertiesInput, TokenTable


def is_reference(value: Any) -> bool:
    """Check whether a value points at another token."""
    return isinstance(value, str) and value.startswith(REFERENCE_PREFIX) and len(value) > 1


def reference_name(value: str) -> str:
    return value[len(REFERENCE_PREFIX) :]


def resolve_token(table: TokenTable, value: Any) -> Any:
    """
    Resolve a single value against the token table.

    Non-references are returned unchanged. Raises UnknownToken when a name is
    missing from the table and CyclicReference when the chain loops.
    """
    chain: list[str] = []
    current = value

    while is_reference(current):
        name = reference_name(current)
        if name in chain:
            raise CyclicReference(chain[0], chain=(*chain, name))
        if name not in table:
            raise UnknownToken(name)
        chain.append(name)
        current = table[name]

    return current


def resolve_value(table: TokenTable, value: Any) -> Any:
    """Resolve a value, descending into nested dicts and lists."""
    if isinstance(value, dict):
        return {key: resolve_value(table, item) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_value(table, item) for item in value]
    return resolve_token(table, value)


def resolve_properties(
    table: TokenTable,
    properties: dict[str, Any],
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """
    Resolve every property of a style dictionary.

    Errors are re-raised located at ``path`` plus the property name.
    """
    resolved: dict[str, Any] = {}
    for name, value in properties.items():
        try:
            resolved[name] = resolve_value(table, value)
        except ResolutionError as e:
            raise e.with_path((*path, name)) from e
    return resolved


def run(inp: ResolvePropertiesInput) -> dict[str, Any]:
    """Main entry point for the tokens component."""
    return resolve_properties(inp.table, inp.properties, inp.path)
