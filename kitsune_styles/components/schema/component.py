"""
Schema component - produce the theme style dictionary.

Drives the mapping processor over a document, composes the style of every
appearance/variant/state entry it yields and resolves token references
against the document's strict tokens.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from kitsune_styles.components.mapping import MappingProcessor, ResolvedComponentAppearance
from kitsune_styles.components.tokens import resolve_properties
from kitsune_styles.domain.mapping import ComponentMapping, MappingSpec, parse_mapping

from ._impl import (
    compose_style,
    fill_parameter_defaults,
    split_key,
    style_key,
    token_table,
    validate_component,
)
from .models import StyleRequest, ThemeStyleType

logger = logging.getLogger(__name__)


class SchemaProcessor:
    def __init__(self, mapping_processor: MappingProcessor | None = None) -> None:
        self._mapping_processor = mapping_processor or MappingProcessor()

    def process(self, params: MappingSpec | Mapping[str, Any]) -> ThemeStyleType:
        """
        Process a mapping document into a flat style dictionary.

        Raises SchemaError for structural defects and ResolutionError for
        bad token references, both located in the source document.
        """
        spec = parse_mapping(params)
        for name, component in spec.components.items():
            validate_component(name, component)

        styles: ThemeStyleType = {}
        for unit in self._mapping_processor.process(spec.components):
            component = spec.components[unit.name]
            styles.update(self.create_unit_styles(spec, component, unit))

        logger.debug(
            "Processed %d components into %d style entries", len(spec.components), len(styles)
        )
        return styles

    def create_unit_styles(
        self,
        spec: MappingSpec,
        component: ComponentMapping,
        unit: ResolvedComponentAppearance,
    ) -> ThemeStyleType:
        table = token_table(spec.strict, component.meta)
        variants = unit.variants or (None,)
        states = (None, *unit.states)

        styles: ThemeStyleType = {}
        for variant in variants:
            for state in states:
                request = StyleRequest(
                    component=unit.name,
                    appearance=unit.appearance,
                    variants=split_key(variant),
                    states=split_key(state),
                )
                key = style_key(request)
                style = fill_parameter_defaults(compose_style(component, request), component.meta)
                styles[key] = resolve_properties(table, style, path=(unit.name, unit.appearance, key))
        return styles


def run(params: MappingSpec | Mapping[str, Any]) -> ThemeStyleType:
    """Main entry point for the schema component."""
    return SchemaProcessor().process(params)
