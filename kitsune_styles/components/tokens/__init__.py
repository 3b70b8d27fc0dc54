"""
Tokens component - token reference resolution.
"""

from kitsune_styles.domain.errors import CyclicReference, ResolutionError, UnknownToken

from .component import (
    is_reference,
    reference_name,
    resolve_properties,
    resolve_token,
    resolve_value,
    run,
)
from .models import REFERENCE_PREFIX, ResolvePropertiesInput, TokenTable

__all__ = [
    # Entry points
    "run",
    "resolve_token",
    "resolve_value",
    "resolve_properties",
    "is_reference",
    "reference_name",
    # Models
    "ResolvePropertiesInput",
    "TokenTable",
    "REFERENCE_PREFIX",
    # Errors
    "ResolutionError",
    "CyclicReference",
    "UnknownToken",
]
