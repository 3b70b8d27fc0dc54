"""
Mapping document models.

A mapping document arrives as a JSON-compatible tree; these models validate
its shape once at the edge so the processors can work on typed values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kitsune_styles.domain.errors import SchemaError

# Separator used in every combination key and style key.
SEPARATOR_MAPPING_ENTRY = "."

# Key of the per-state override block nested inside a mapping.
STATE_KEY = "state"

# Key of the identity stamp added by the theme store.
THEME_ID_KEY = "__themeId"


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# --- Meta ---


class ParameterMeta(_Model):
    type: str = "string"
    default: Any = None


class AppearanceMeta(_Model):
    default: bool = False


class VariantMeta(_Model):
    default: bool = False


class StateMeta(_Model):
    default: bool = False
    priority: int = 0


class ComponentMeta(_Model):
    scope: str = "all"
    parameters: dict[str, ParameterMeta] = Field(default_factory=dict)
    appearances: dict[str, AppearanceMeta] = Field(default_factory=dict)
    variant_groups: dict[str, dict[str, VariantMeta]] = Field(
        default_factory=dict, alias="variantGroups"
    )
    states: dict[str, StateMeta] = Field(default_factory=dict)

    def default_appearance(self) -> str | None:
        """Name of the first appearance marked default, if any."""
        for name, appearance in self.appearances.items():
            if appearance.default:
                return name
        return None

    def parameter_defaults(self) -> dict[str, Any]:
        return {
            name: parameter.default
            for name, parameter in self.parameters.items()
            if parameter.default is not None
        }


# --- Mapping ---


class AppearanceMapping(_Model):
    mapping: dict[str, Any] = Field(default_factory=dict)
    variant_groups: dict[str, dict[str, dict[str, Any]]] = Field(
        default_factory=dict, alias="variantGroups"
    )
    states: dict[str, dict[str, Any]] = Field(default_factory=dict)


class ComponentMapping(_Model):
    meta: ComponentMeta = Field(default_factory=ComponentMeta)
    appearances: dict[str, AppearanceMapping]


class MappingSpec(_Model):
    version: float = 1.0
    strict: dict[str, Any] = Field(default_factory=dict)
    components: dict[str, ComponentMapping] = Field(default_factory=dict)


# --- Parsing ---


def _schema_error(exc: ValidationError, prefix: tuple[str, ...]) -> SchemaError:
    first = exc.errors()[0]
    loc = prefix + tuple(str(part) for part in first["loc"])
    return SchemaError(first["msg"], loc)


def parse_component(name: str, document: ComponentMapping | Mapping[str, Any]) -> ComponentMapping:
    """Validate a single component block, naming it in any SchemaError."""
    if isinstance(document, ComponentMapping):
        return document
    if not isinstance(document, Mapping):
        raise SchemaError("component block must be an object", (name,))
    if "appearances" not in document:
        raise SchemaError(f"component '{name}' has no appearances block", (name,))
    try:
        return ComponentMapping.model_validate(document)
    except ValidationError as e:
        raise _schema_error(e, (name,)) from e


def parse_mapping(document: MappingSpec | Mapping[str, Any]) -> MappingSpec:
    """Validate a whole mapping document."""
    if isinstance(document, MappingSpec):
        return document
    if not isinstance(document, Mapping):
        raise SchemaError("mapping document must be an object")

    components = document.get("components") or {}
    if not isinstance(components, Mapping):
        raise SchemaError("components must be an object", ("components",))

    # Validate components one by one so a missing block names its component.
    parsed = {name: parse_component(name, block) for name, block in components.items()}
    try:
        return MappingSpec.model_validate({**document, "components": parsed})
    except ValidationError as e:
        raise _schema_error(e, ()) from e
